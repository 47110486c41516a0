"""
HTTP status error hierarchy.

A response with status >= 400 is surfaced as an :class:`APIStatusError`
subclass chosen by :func:`status_error_class`. The instance keeps the parsed
body (best effort), the raw ``httpx`` request and response, and a message of
the form ``Error code: <status> - <raw body>``.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Type

import httpx

from .error_code import ErrorCode
from .groq_error import GroqError


class APIStatusError(GroqError):
    """Raised when the API responds with a status code >= 400.

    Attributes:
        status_code: HTTP status of the failed response.
        body: Parsed JSON body, or ``None`` when the body was not valid JSON.
        response: The ``httpx.Response`` (already read).
        request: The ``httpx.Request`` that produced the response.
    """

    code = ErrorCode.UNKNOWN

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        body: Any = None,
        response: Optional[httpx.Response] = None,
        request: Optional[httpx.Request] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.response = response
        self.request = request

    @property
    def error(self) -> Optional[Dict[str, Any]]:
        """The ``error`` object from the body when the server sent one."""
        if isinstance(self.body, dict):
            err = self.body.get("error")
            if isinstance(err, dict):
                return err
        return None


class BadRequestError(APIStatusError):
    code = ErrorCode.VALIDATION


class AuthenticationError(APIStatusError):
    code = ErrorCode.AUTH


class PermissionDeniedError(APIStatusError):
    code = ErrorCode.AUTH


class NotFoundError(APIStatusError):
    code = ErrorCode.NOT_FOUND


class ConflictError(APIStatusError):
    code = ErrorCode.CONFLICT


class UnprocessableEntityError(APIStatusError):
    code = ErrorCode.VALIDATION


class RateLimitError(APIStatusError):
    code = ErrorCode.RATE_LIMIT


class InternalServerError(APIStatusError):
    code = ErrorCode.SERVER_ERROR


class APIStreamError(GroqError):
    """Raised when the server sends an ``error`` event inside an event stream."""

    code = ErrorCode.SERVER_ERROR

    def __init__(self, message: str, *, body: Any = None) -> None:
        super().__init__(message)
        self.body = body


_STATUS_CLASSES: Dict[int, Type[APIStatusError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


def status_error_class(status_code: int) -> Type[APIStatusError]:
    """Return the exception class for an HTTP status code (>= 400)."""
    if status_code >= 500:
        return InternalServerError
    return _STATUS_CLASSES.get(status_code, APIStatusError)


def make_status_error(
    response: httpx.Response,
    *,
    body: Any,
    raw_text: str,
) -> APIStatusError:
    """Build the matching :class:`APIStatusError` for an already-read response."""
    status = response.status_code
    cls = status_error_class(status)
    try:
        request: Optional[httpx.Request] = response.request
    except RuntimeError:  # response built without a request (tests, adapters)
        request = None
    return cls(
        f"Error code: {status} - {raw_text}",
        status_code=status,
        body=body,
        response=response,
        request=request,
    )


__all__ = [
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
]
