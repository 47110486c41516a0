"""Map arbitrary exceptions onto :class:`ErrorCode`.

Library errors already carry a code. Anything else (``httpx`` errors, foreign
exceptions surfacing in callbacks or log sites) is classified by type, then by
an HTTP status found on the object, then by keywords in its message.
"""
from __future__ import annotations

import asyncio
from typing import Dict, Optional, Tuple

import httpx

from .error_code import ErrorCode
from .groq_error import DecodeError, GroqError, RequestTimeoutError, TransportError


def _valid_status(value: object) -> Optional[int]:
    if isinstance(value, int) and not isinstance(value, bool) and 100 <= value < 600:
        return value
    return None


def _extract_status(exc: Exception) -> Optional[int]:
    """HTTP status from ``status_code``, ``status`` or ``response.status_code``."""
    for candidate in (
        getattr(exc, "status_code", None),
        getattr(exc, "status", None),
        getattr(getattr(exc, "response", None), "status_code", None),
    ):
        status = _valid_status(candidate)
        if status is not None:
            return status
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}

# (code, keywords, every keyword required); first match wins.
_MESSAGE_RULES: Tuple[Tuple[ErrorCode, Tuple[str, ...], bool], ...] = (
    (ErrorCode.RATE_LIMIT, ("rate", "limit"), True),
    (ErrorCode.TIMEOUT, ("timeout", "timed out"), False),
    (ErrorCode.AUTH, ("api key", "unauthorized", "forbidden"), False),
    (ErrorCode.UNSUPPORTED, ("not supported",), False),
    (ErrorCode.NOT_FOUND, ("not found", "does not exist"), False),
    (ErrorCode.CONFLICT, ("conflict",), False),
    (ErrorCode.UNAVAILABLE, ("unavailable",), False),
    (ErrorCode.VALIDATION, ("invalid", "malformed"), False),
    (ErrorCode.SERVER_ERROR, ("server error",), False),
)


def _code_from_message(message: str) -> Optional[ErrorCode]:
    text = message.lower()
    for code, keywords, require_all in _MESSAGE_RULES:
        hits = [k in text for k in keywords]
        if all(hits) if require_all else any(hits):
            return code
    return None


def _code_from_status(status: int) -> Optional[ErrorCode]:
    code = _HTTP_STATUS_MAP.get(status)
    if code is None and status >= 500:
        return ErrorCode.SERVER_ERROR
    return code


def classify_exception(exc: Exception) -> ErrorCode:
    """Return the :class:`ErrorCode` that best describes ``exc``.

    Order: ``GroqError.code``; timeouts; undecodable ``httpx`` bodies; other
    ``httpx`` failures; a mapped HTTP status (unmapped 5xx become
    ``SERVER_ERROR``); message keywords; otherwise ``UNKNOWN``.
    """
    if isinstance(exc, GroqError):
        return exc.code
    if isinstance(exc, (httpx.TimeoutException, TimeoutError, asyncio.TimeoutError)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, httpx.DecodingError):
        return ErrorCode.DECODE
    if isinstance(exc, (httpx.HTTPError, httpx.StreamError)) and not isinstance(exc, httpx.HTTPStatusError):
        return ErrorCode.TRANSPORT
    status = _extract_status(exc)
    if status is not None:
        code = _code_from_status(status)
        if code is not None:
            return code
    return _code_from_message(str(exc)) or ErrorCode.UNKNOWN


def from_httpx_error(exc: Exception, what: str = "request") -> Exception:
    """Translate an ``httpx`` failure into the library taxonomy.

    Timeouts become ``RequestTimeoutError``, undecodable bodies (bad gzip or
    deflate) ``DecodeError``, and every other ``httpx`` error ``TransportError``.
    Anything else is returned unchanged.
    """
    if isinstance(exc, httpx.TimeoutException):
        return RequestTimeoutError(f"{what} timed out: {exc}")
    if isinstance(exc, httpx.DecodingError):
        return DecodeError(f"{what} body could not be decoded: {exc}")
    if isinstance(exc, (httpx.HTTPError, httpx.StreamError)):
        return TransportError(f"{what} failed: {type(exc).__name__}: {exc}")
    return exc


__all__ = ["classify_exception", "from_httpx_error"]
