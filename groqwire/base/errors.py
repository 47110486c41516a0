"""Unified client error taxonomy public surface.

This module re-exports the implementations under
``groqwire.base.errors_parts`` to maintain a stable import path.

Hierarchy
---------
``GroqError``
    ``TransportError`` (``RequestTimeoutError``), ``ResponseValidationError``,
    ``DecodeError`` (``SSEDecodeError``), ``APIStreamError``,
    ``APIStatusError`` and its per-status subclasses, and
    ``groqwire.base.cancellation.CancelledError``.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.groq_error import (
    GroqError,
    TransportError,
    RequestTimeoutError,
    ResponseValidationError,
    DecodeError,
    SSEDecodeError,
)
from .errors_parts.status_errors import (
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
from .errors_parts.classification import classify_exception, from_httpx_error

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
