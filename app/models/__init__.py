# Models package
# Importing modules here ensures they are registered with SQLAlchemy Base
from . import employee, leave_balance, leave_type, leave_request

# Explicit class exports for cleaner imports
from .enums import LeaveCategory, LeaveStatus
from .employee import Employee
from .leave_balance import LeaveBalance
from .leave_type import LeaveType
from .leave_request import LeaveRequest

__all__ = [
    "LeaveCategory",
    "LeaveStatus",
    "Employee",
    "LeaveBalance",
    "LeaveType",
    "LeaveRequest",
]
