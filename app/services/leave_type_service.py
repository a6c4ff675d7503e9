from typing import List

from app.core.exceptions import InvalidPayloadError, NotFoundError
from app.models.leave_type import LeaveType
from app.schemas.leave import LeaveTypeCreate
from app.services.base import BaseService


class LeaveTypeService(BaseService):

    def get(self, leave_type_id: str) -> LeaveType:
        leave_type = self.db.get(LeaveType, leave_type_id)
        if leave_type is None:
            raise NotFoundError("Leave type not found")
        return leave_type

    def list(self) -> List[LeaveType]:
        leave_types = self.db.query(LeaveType).order_by(LeaveType.id).all()
        if not leave_types:
            raise NotFoundError("No leave types found")
        return leave_types

    def create(self, payload: LeaveTypeCreate) -> LeaveType:
        # Several leave types may share a category; each carries its own quota.
        if not payload.name or not payload.quota:
            raise InvalidPayloadError("Ensure 'name' and 'quota' are provided.")
        if payload.quota < 0:
            raise InvalidPayloadError("Quota must be a positive number of days.")

        leave_type = LeaveType(
            name=payload.name,
            quota=payload.quota,
            carryover_allowed=payload.carryover_allowed,
        )
        with self.write_transaction():
            self.db.add(leave_type)

        self.db.refresh(leave_type)
        self.log_info(
            f"Created leave type {leave_type.id} ({leave_type.name.value}, quota {leave_type.quota})",
            leave_type_id=leave_type.id,
        )
        return leave_type
