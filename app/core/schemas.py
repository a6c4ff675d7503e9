from typing import Any, Dict, List, Optional
from pydantic import BaseModel

class ErrorInfo(BaseModel):
    msg: str
    code: Optional[str] = None
    field: Optional[str] = None

class ErrorResponse(BaseModel):
    success: bool = False
    errors: List[ErrorInfo]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, leaving out unset optional keys."""
        return self.model_dump(mode="json", exclude_none=True)

class MessageResponse(BaseModel):
    """Confirmation for mutations that do not return a record."""
    success: bool = True
    message: str

    @classmethod
    def ok(cls, message: str) -> "MessageResponse":
        return cls(success=True, message=message)
