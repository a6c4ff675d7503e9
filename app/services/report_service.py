from typing import List

from app.core.exceptions import NotFoundError
from app.models.employee import Employee
from app.models.leave_request import LeaveRequest
from app.models.leave_type import LeaveType
from app.services.base import BaseService


class LeaveReportService(BaseService):
    """Plain-text leave history for one employee."""

    def generate(self, employee_id: str) -> str:
        requests: List[LeaveRequest] = (
            self.db.query(LeaveRequest)
            .filter(LeaveRequest.employee_id == employee_id)
            .order_by(LeaveRequest.id)
            .all()
        )
        if not requests:
            raise NotFoundError("No leave requests found for the employee.")

        employee = self.db.get(Employee, employee_id)
        if employee is None:
            raise NotFoundError("Employee not found.")

        balances = employee.leave_balances
        report = f"Leave report for {employee.name} (Employee ID: {employee.id})\n\n"

        for request in requests:
            leave_type = self.db.get(LeaveType, request.leave_type_id)
            if leave_type is None:
                raise NotFoundError(f"Leave type not found for request ID: {request.id}")

            report += (
                f"Leave Request ID: {request.id}\n"
                f"Leave Type: {leave_type.name.value}\n"
                f"Quota: {leave_type.quota}\n"
                f"Remaining Leaves: {balances.get(leave_type.name.value, 0)}\n"
                f"Start Date: {request.start_date.isoformat()}\n"
                f"End Date: {request.end_date.isoformat()}\n"
                f"Status: {request.status.value}\n"
                f"Reason: {request.reason}\n\n"
            )

        self._logger.debug(f"Generated leave report for employee {employee_id} ({len(requests)} requests)")
        return report
