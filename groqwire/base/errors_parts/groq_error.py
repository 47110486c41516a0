"""
Root exception type and the non-HTTP error kinds.

Every exception raised by the library derives from :class:`GroqError` so
callers can catch a single base type. Each class carries a normalized
:class:`ErrorCode` for structured logging.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode


class GroqError(Exception):
    """Base class for all library errors.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
    """

    code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(self, message: str, *, code: Optional[ErrorCode] = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class TransportError(GroqError):
    """The request could not be completed (DNS, TLS, connect, reset)."""

    code = ErrorCode.TRANSPORT


class RequestTimeoutError(TransportError):
    """The HTTP request exceeded its configured timeout."""

    code = ErrorCode.TIMEOUT


class ResponseValidationError(GroqError):
    """A successful response violated the expected content-type contract.

    Raised only when strict validation is enabled on the client.
    """

    code = ErrorCode.VALIDATION

    def __init__(self, message: str, *, content_type: Optional[str] = None) -> None:
        super().__init__(message)
        self.content_type = content_type


class DecodeError(GroqError):
    """A response body or stream payload could not be decoded."""

    code = ErrorCode.DECODE


class SSEDecodeError(DecodeError):
    """The event-stream framing was invalid (for example a line over the size limit)."""


__all__ = [
    "GroqError",
    "TransportError",
    "RequestTimeoutError",
    "ResponseValidationError",
    "DecodeError",
    "SSEDecodeError",
]
