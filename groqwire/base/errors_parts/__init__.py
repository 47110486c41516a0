"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `groqwire.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .groq_error import (
    GroqError,
    TransportError,
    RequestTimeoutError,
    ResponseValidationError,
    DecodeError,
    SSEDecodeError,
)
from .status_errors import (
    APIStatusError,
    BadRequestError,
    AuthenticationError,
    PermissionDeniedError,
    NotFoundError,
    ConflictError,
    UnprocessableEntityError,
    RateLimitError,
    InternalServerError,
    APIStreamError,
    status_error_class,
    make_status_error,
)
from .classification import classify_exception, from_httpx_error

__all__ = [
    "ErrorCode",
    "GroqError",
    "TransportError",
    "RequestTimeoutError",
    "ResponseValidationError",
    "DecodeError",
    "SSEDecodeError",
    "APIStatusError",
    "BadRequestError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "ConflictError",
    "UnprocessableEntityError",
    "RateLimitError",
    "InternalServerError",
    "APIStreamError",
    "status_error_class",
    "make_status_error",
    "classify_exception",
    "from_httpx_error",
]
