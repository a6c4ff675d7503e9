from sqlalchemy import Column, Integer, String, Enum, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.enums import LeaveCategory

class LeaveBalance(Base):
    __tablename__ = "leave_balances"
    __table_args__ = (UniqueConstraint("employee_id", "leave_type", name="uq_balance_employee_category"),)

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(String(36), ForeignKey("employees.id"), index=True, nullable=False)
    leave_type = Column(Enum(LeaveCategory, values_callable=lambda e: [m.value for m in e]), nullable=False)
    remaining_days = Column(Integer, nullable=False, default=0)

    employee = relationship("Employee", back_populates="balance_rows")
