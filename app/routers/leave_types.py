from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app.database import get_db
from app.schemas.leave import LeaveTypeCreate, LeaveTypeResponse
from app.services.leave_type_service import LeaveTypeService

router = APIRouter(prefix="/leave-types")


@router.post("", response_model=LeaveTypeResponse, status_code=status.HTTP_201_CREATED)
def create_leave_type(payload: LeaveTypeCreate, db: Session = Depends(get_db)):
    return LeaveTypeService(db).create(payload)


@router.get("", response_model=List[LeaveTypeResponse])
def get_leave_types(db: Session = Depends(get_db)):
    return LeaveTypeService(db).list()
