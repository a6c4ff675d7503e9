import re
from typing import List

from app.core.config import settings
from app.core.exceptions import BusinessRuleError, InvalidPayloadError, NotFoundError
from app.models.employee import Employee
from app.models.enums import LeaveCategory, LeaveStatus
from app.models.leave_balance import LeaveBalance
from app.models.leave_request import LeaveRequest
from app.schemas.employee import EmployeeCreate
from app.services.base import BaseService

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"\+?[1-9][0-9]{1,14}")


class EmployeeService(BaseService):

    def get(self, employee_id: str) -> Employee:
        employee = self.db.get(Employee, employee_id)
        if employee is None:
            raise NotFoundError("Employee not found")
        return employee

    def list(self) -> List[Employee]:
        employees = self.db.query(Employee).order_by(Employee.id).all()
        if not employees:
            raise NotFoundError("No employees found")
        return employees

    def create(self, payload: EmployeeCreate) -> Employee:
        """
        Register an employee with every leave category at the default balance.

        Checks run in a fixed order: required fields, email format, email
        uniqueness, phone format. The first failure wins.
        """
        if not payload.name or not payload.email or not payload.phone_number:
            raise InvalidPayloadError("Ensure 'name', 'email', and 'phone number' are provided.")

        if not EMAIL_PATTERN.fullmatch(payload.email):
            raise InvalidPayloadError("Invalid email format")

        with self.write_transaction():
            existing = self.db.query(Employee).filter(Employee.email == payload.email).first()
            if existing:
                raise InvalidPayloadError("Email already exists.")

            if not PHONE_PATTERN.fullmatch(payload.phone_number):
                raise InvalidPayloadError("Invalid phone number format.")

            employee = Employee(
                name=payload.name,
                email=payload.email,
                phone_number=payload.phone_number,
            )
            employee.balance_rows = [
                LeaveBalance(leave_type=category, remaining_days=settings.default_leave_balance)
                for category in LeaveCategory
            ]
            self.db.add(employee)

        self.db.refresh(employee)
        self.log_info(f"Registered employee {employee.id}", employee_id=employee.id)
        return employee

    def delete(self, employee_id: str) -> str:
        """Remove an employee and, with it, every leave request they own."""
        with self.write_transaction():
            employee = self.get(employee_id)

            has_pending = self.db.query(LeaveRequest).filter(
                LeaveRequest.employee_id == employee_id,
                LeaveRequest.status == LeaveStatus.PENDING,
            ).first() is not None
            if has_pending:
                self.log_warning(f"Refused to delete employee {employee_id} with pending requests")
                raise BusinessRuleError("Cannot delete employee with pending leave requests.")

            removed = len(employee.leave_requests)
            self.db.delete(employee)

        self.log_info(
            f"Deleted employee {employee_id} and {removed} leave request(s)",
            employee_id=employee_id,
        )
        return "Employee and associated leave requests deleted."
