import uuid

from sqlalchemy import Column, String, Date, Enum, ForeignKey, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.enums import LeaveStatus

class LeaveRequest(Base):
    __tablename__ = "leave_requests"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    employee_id = Column(String(36), ForeignKey("employees.id"), index=True, nullable=False)
    leave_type_id = Column(String(36), ForeignKey("leave_types.id"), index=True, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    status = Column(
        Enum(LeaveStatus, values_callable=lambda e: [m.value for m in e]),
        default=LeaveStatus.PENDING,
        nullable=False,
    )
    reason = Column(String, default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    employee = relationship("Employee", back_populates="leave_requests")

    def overlaps(self, start_date, end_date) -> bool:
        """True when either boundary of the given window lands inside this request."""
        return (
            self.start_date <= start_date <= self.end_date
            or self.start_date <= end_date <= self.end_date
        )
