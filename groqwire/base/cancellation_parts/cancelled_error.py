"""Cancellation error type.

Defines the public ``CancelledError`` raised when a request, retry wait or
stream pull observes a cancelled token.
"""

from __future__ import annotations

from ..errors_parts.error_code import ErrorCode
from ..errors_parts.groq_error import GroqError


class CancelledError(GroqError, RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    Distinguishes cooperative cancellation from other runtime failures so
    callers can suppress log noise and skip retry logic.
    """

    code = ErrorCode.CANCELLED

    def __init__(self, message: str = "operation cancelled") -> None:
        super().__init__(message)


__all__ = ["CancelledError"]
