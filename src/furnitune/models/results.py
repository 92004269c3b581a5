from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class ErrorKind(str, Enum):
    """Why a mutation did not happen"""
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID = "invalid"
    EMPTY = "empty"
    INTERNAL = "internal"


class OperationResult(BaseModel):
    """Outcome of a write operation; truthy only on success"""
    success: bool
    message: Optional[str] = None
    error: Optional[ErrorKind] = None
    data: Any = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls, data: Any = None, message: Optional[str] = None) -> "OperationResult":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, error: ErrorKind, message: str) -> "OperationResult":
        return cls(success=False, error=error, message=message)
