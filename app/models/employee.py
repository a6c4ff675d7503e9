"""
Employee Model.
Balances live in leave_balances, one row per leave category.
"""
import uuid
from typing import Dict

from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.enums import LeaveCategory


class Employee(Base):
    __tablename__ = "employees"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    phone_number = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    balance_rows = relationship("LeaveBalance", back_populates="employee", cascade="all, delete-orphan")
    leave_requests = relationship("LeaveRequest", back_populates="employee", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Employee {self.email}>"

    @property
    def leave_balances(self) -> Dict[str, int]:
        """Remaining days per category, in category declaration order."""
        by_category = {row.leave_type: row.remaining_days for row in self.balance_rows}
        return {c.value: by_category.get(c, 0) for c in LeaveCategory}

    def balance_for(self, category: LeaveCategory):
        for row in self.balance_rows:
            if row.leave_type == category:
                return row
        return None
