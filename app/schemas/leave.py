from pydantic import BaseModel, ConfigDict
from datetime import date, datetime
from typing import Optional

from app.models.enums import LeaveCategory, LeaveStatus

class LeaveTypeCreate(BaseModel):
    name: Optional[LeaveCategory] = None
    quota: Optional[int] = None
    carryover_allowed: bool = False

class LeaveTypeResponse(BaseModel):
    id: str
    name: LeaveCategory
    quota: int
    carryover_allowed: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class LeaveRequestCreate(BaseModel):
    employee_id: str
    leave_type_id: str
    start_date: date
    end_date: date
    reason: str = ""

class LeaveRequestResponse(BaseModel):
    id: str
    employee_id: str
    leave_type_id: str
    start_date: date
    end_date: date
    status: LeaveStatus
    reason: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
