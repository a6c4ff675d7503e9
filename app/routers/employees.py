from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session
from typing import List

from app.core.schemas import MessageResponse
from app.database import get_db
from app.schemas.employee import EmployeeCreate, EmployeeResponse
from app.schemas.leave import LeaveRequestResponse
from app.services.employee_service import EmployeeService
from app.services.leave_request_service import LeaveRequestService
from app.services.report_service import LeaveReportService

router = APIRouter(prefix="/employees")


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(payload: EmployeeCreate, db: Session = Depends(get_db)):
    """Register an employee with default balances in every leave category."""
    return EmployeeService(db).create(payload)


@router.get("", response_model=List[EmployeeResponse])
def get_employees(db: Session = Depends(get_db)):
    return EmployeeService(db).list()


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(employee_id: str, db: Session = Depends(get_db)):
    return EmployeeService(db).get(employee_id)


@router.delete("/{employee_id}", response_model=MessageResponse)
def delete_employee(employee_id: str, db: Session = Depends(get_db)):
    """
    Delete an employee and all of their leave requests.
    Refused while any of their requests is still pending.
    """
    return MessageResponse.ok(EmployeeService(db).delete(employee_id))


@router.get("/{employee_id}/leave-requests", response_model=List[LeaveRequestResponse])
def get_employee_leave_requests(employee_id: str, db: Session = Depends(get_db)):
    return LeaveRequestService(db).list_for_employee(employee_id)


@router.get("/{employee_id}/leave-report", response_class=PlainTextResponse)
def generate_leave_report(employee_id: str, db: Session = Depends(get_db)):
    return LeaveReportService(db).generate(employee_id)
