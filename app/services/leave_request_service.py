"""
Leave request lifecycle.

Pending -> Approved -> Accrued. Approval and accrual each deduct the leave
type's quota from the employee's balance for that category. Cancelling
removes a request outright and is refused once it has been approved.
"""
from datetime import date
from typing import List

from app.core.exceptions import BusinessRuleError, InvalidPayloadError, NotFoundError
from app.models.employee import Employee
from app.models.enums import LeaveStatus
from app.models.leave_balance import LeaveBalance
from app.models.leave_request import LeaveRequest
from app.models.leave_type import LeaveType
from app.schemas.leave import LeaveRequestCreate
from app.services.base import BaseService


class LeaveRequestService(BaseService):

    # --- Lookups ---

    def get(self, request_id: str) -> LeaveRequest:
        leave_request = self.db.get(LeaveRequest, request_id)
        if leave_request is None:
            raise NotFoundError("Leave request not found")
        return leave_request

    def list(self) -> List[LeaveRequest]:
        requests = self.db.query(LeaveRequest).order_by(LeaveRequest.id).all()
        if not requests:
            raise NotFoundError("No leave requests found")
        return requests

    def list_for_employee(self, employee_id: str) -> List[LeaveRequest]:
        requests = (
            self.db.query(LeaveRequest)
            .filter(LeaveRequest.employee_id == employee_id)
            .order_by(LeaveRequest.id)
            .all()
        )
        if not requests:
            raise NotFoundError(f"No leave requests found for employee with id {employee_id}")
        return requests

    def _employee(self, employee_id: str) -> Employee:
        employee = self.db.get(Employee, employee_id)
        if employee is None:
            raise NotFoundError("Employee not found")
        return employee

    def _leave_type(self, leave_type_id: str) -> LeaveType:
        leave_type = self.db.get(LeaveType, leave_type_id)
        if leave_type is None:
            raise NotFoundError("Leave type not found")
        return leave_type

    # --- Rules ---

    def _sufficient_balance(self, employee: Employee, leave_type: LeaveType) -> LeaveBalance:
        """Return the balance row to deduct from, or raise if it cannot cover the quota."""
        balance = employee.balance_for(leave_type.name)
        remaining = balance.remaining_days if balance is not None else 0
        if balance is None or remaining < leave_type.quota:
            self.log_warning(
                f"Insufficient {leave_type.name.value} balance for employee {employee.id}",
                remaining=remaining,
                quota=leave_type.quota,
            )
            raise BusinessRuleError(
                "Insufficient leave balance for this leave type.",
                details={"remaining": remaining, "quota": leave_type.quota},
            )
        return balance

    def has_overlap(self, employee_id: str, start_date: date, end_date: date) -> bool:
        """
        A new window overlaps when its start or end date falls inside an existing
        non-rejected request of the same employee, both boundaries inclusive.
        Only the new window's boundaries are tested, so enclosing an existing
        request is not an overlap.
        """
        existing = self.db.query(LeaveRequest).filter(
            LeaveRequest.employee_id == employee_id,
            LeaveRequest.status != LeaveStatus.REJECTED,
        ).all()
        return any(req.overlaps(start_date, end_date) for req in existing)

    # --- Operations ---

    def create(self, payload: LeaveRequestCreate) -> LeaveRequest:
        with self.write_transaction():
            employee = self._employee(payload.employee_id)
            leave_type = self._leave_type(payload.leave_type_id)
            self._sufficient_balance(employee, leave_type)

            # Ordering is checked first so a reversed range is never reported as an overlap
            if payload.start_date > payload.end_date:
                raise InvalidPayloadError("Start date cannot be later than end date.")

            if self.has_overlap(payload.employee_id, payload.start_date, payload.end_date):
                self.log_warning(f"Overlapping leave request for employee {employee.id}")
                raise BusinessRuleError("Leave dates overlap with an existing request.")

            leave_request = LeaveRequest(
                employee_id=payload.employee_id,
                leave_type_id=payload.leave_type_id,
                start_date=payload.start_date,
                end_date=payload.end_date,
                reason=payload.reason,
                status=LeaveStatus.PENDING,
            )
            self.db.add(leave_request)

        self.db.refresh(leave_request)
        self.log_info(
            f"Created leave request {leave_request.id} for employee {leave_request.employee_id}",
            leave_request_id=leave_request.id,
        )
        return leave_request

    def approve(self, request_id: str) -> str:
        with self.write_transaction():
            leave_request = self.get(request_id)
            if leave_request.status == LeaveStatus.APPROVED:
                raise BusinessRuleError("Leave request is already approved.")
            if leave_request.status != LeaveStatus.PENDING:
                raise BusinessRuleError(
                    f"Only pending leave requests can be approved (status: {leave_request.status.value})."
                )

            employee = self._employee(leave_request.employee_id)
            leave_type = self._leave_type(leave_request.leave_type_id)
            balance = self._sufficient_balance(employee, leave_type)

            balance.remaining_days -= leave_type.quota
            leave_request.status = LeaveStatus.APPROVED

        self.log_info(
            f"Approved leave request {request_id}; {leave_type.name.value} balance now {balance.remaining_days}",
            leave_request_id=request_id,
        )
        return "Leave request approved and leave balance updated."

    def accrue(self, request_id: str) -> str:
        """
        Settle an approved request. This charges the quota again on top of the
        deduction made at approval time.
        """
        with self.write_transaction():
            leave_request = self.get(request_id)
            if leave_request.status == LeaveStatus.ACCRUED:
                raise BusinessRuleError("Leave request already accrued.")
            if leave_request.status != LeaveStatus.APPROVED:
                raise BusinessRuleError("Leave request is not approved.")

            employee = self._employee(leave_request.employee_id)
            leave_type = self._leave_type(leave_request.leave_type_id)
            # Balances are unsigned; a deduction that would go below zero is refused.
            balance = self._sufficient_balance(employee, leave_type)

            balance.remaining_days -= leave_type.quota
            leave_request.status = LeaveStatus.ACCRUED

        self.log_info(
            f"Accrued leave request {request_id}; {leave_type.name.value} balance now {balance.remaining_days}",
            leave_request_id=request_id,
        )
        return "Leave request accrued successfully and balance updated."

    def cancel(self, request_id: str) -> str:
        with self.write_transaction():
            leave_request = self.get(request_id)
            if leave_request.status == LeaveStatus.APPROVED:
                raise BusinessRuleError("Cannot cancel an approved leave request.")
            self.db.delete(leave_request)

        self.log_info(f"Cancelled leave request {request_id}", leave_request_id=request_id)
        return "Leave request canceled successfully."
