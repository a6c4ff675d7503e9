from typing import Any, Dict, Optional

class AppException(Exception):
    def __init__(
        self,
        message: str,
        status_code: int = 400,
        error_code: str = "BUSINESS_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)

class InvalidPayloadError(AppException):
    """Malformed or missing input."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=400,
            error_code="INVALID_PAYLOAD",
            details=details
        )

class NotFoundError(AppException):
    """Referenced entity is absent, or a listing would be empty."""
    def __init__(self, message: str):
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND"
        )

class BusinessRuleError(AppException):
    """A leave rule was violated (balance, overlap, lifecycle state)."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=409,
            error_code="BUSINESS_ERROR",
            details=details
        )
