"""
Service results and error taxonomy.

Recoverable outcomes (bad input, unknown product, insufficient stock,
ownership mismatch, missing order) travel as OrderResult failures.
Only unexpected infrastructure faults are raised, as OrderInternalError.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class OrderErrorCode(str, Enum):
    """Failure categories returned by the order service."""

    VALIDATION_ERROR = "validation_error"
    INVALID_REQUEST = "invalid_request"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class OrderError:
    """Typed failure with a human-readable explanation."""

    code: OrderErrorCode
    message: str


@dataclass(frozen=True)
class OrderResult(Generic[T]):
    """Either a value or an OrderError."""

    value: Optional[T] = None
    error: Optional[OrderError] = None

    @property
    def success(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, value: T) -> "OrderResult[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, code: OrderErrorCode, message: str) -> "OrderResult[T]":
        return cls(error=OrderError(code=code, message=message))


class OrderInternalError(Exception):
    """
    Unexpected persistence or infrastructure failure.

    The message is safe to show to callers; the original cause is chained
    via ``raise ... from`` and logged server-side.
    """

    def __init__(self, message: str = "An unexpected error occurred. Please try again.") -> None:
        super().__init__(message)
        self.message = message
