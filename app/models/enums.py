import enum


class LeaveCategory(str, enum.Enum):
    """The dimension both leave types and employee balances are keyed by."""
    ANNUAL = "Annual"
    SICK = "Sick"
    MATERNITY = "Maternity"
    PATERNITY = "Paternity"
    UNPAID = "Unpaid"


class LeaveStatus(str, enum.Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    ACCRUED = "Accrued"
