from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app.core.schemas import MessageResponse
from app.database import get_db
from app.schemas.leave import LeaveRequestCreate, LeaveRequestResponse
from app.services.leave_request_service import LeaveRequestService

router = APIRouter(prefix="/leave-requests")

# --- Endpoints ---

@router.post("", response_model=LeaveRequestResponse, status_code=status.HTTP_201_CREATED)
def create_leave_request(payload: LeaveRequestCreate, db: Session = Depends(get_db)):
    """
    Submit a leave request. It starts as Pending; nothing is deducted until approval.
    """
    return LeaveRequestService(db).create(payload)

@router.get("", response_model=List[LeaveRequestResponse])
def get_leave_requests(db: Session = Depends(get_db)):
    return LeaveRequestService(db).list()

@router.put("/{request_id}/approve", response_model=MessageResponse)
def approve_leave_request(request_id: str, db: Session = Depends(get_db)):
    return MessageResponse.ok(LeaveRequestService(db).approve(request_id))

@router.put("/{request_id}/accrue", response_model=MessageResponse)
def accrue_leave(request_id: str, db: Session = Depends(get_db)):
    return MessageResponse.ok(LeaveRequestService(db).accrue(request_id))

@router.delete("/{request_id}", response_model=MessageResponse)
def cancel_leave_request(request_id: str, db: Session = Depends(get_db)):
    """Cancel (delete) a request that has not been approved."""
    return MessageResponse.ok(LeaveRequestService(db).cancel(request_id))
