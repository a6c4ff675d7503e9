import uuid

from sqlalchemy import Column, Integer, String, Boolean, Enum, DateTime
from sqlalchemy.sql import func
from app.database import Base
from app.models.enums import LeaveCategory

class LeaveType(Base):
    __tablename__ = "leave_types"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(Enum(LeaveCategory, values_callable=lambda e: [m.value for m in e]), nullable=False, index=True)
    quota = Column(Integer, nullable=False)  # days consumed per approval/accrual
    carryover_allowed = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
