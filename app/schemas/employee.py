from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Dict, Optional


class EmployeeCreate(BaseModel):
    """Registration payload. Emptiness and format are checked by the service."""
    name: str
    email: str
    phone_number: str = Field(..., description="E.164-style number, optional leading '+'")


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    phone_number: str
    leave_balances: Dict[str, int]
    created_at: Optional[datetime] = None
