"""Response classification and decoding.

``raise_for_status`` turns status >= 400 into the matching
``APIStatusError`` subclass (body parsed best effort). ``check_content_type``
enforces the strict-validation contract. ``decode_response`` converts a
successful body into the caller's pydantic type.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..base.constants import EVENT_STREAM_CONTENT_TYPE, JSON_CONTENT_TYPE
from ..base.errors import DecodeError, ResponseValidationError, make_status_error
from ..base.logging import LogContext, log_event

M = TypeVar("M", bound=BaseModel)


def raise_for_status(
    response: httpx.Response,
    logger: logging.Logger,
    ctx: Optional[LogContext] = None,
) -> None:
    """Raise the status error for ``response`` when its status is >= 400.

    The body is read here. A body that is not JSON is kept as raw text in the
    message and ``body`` is ``None``.
    """
    if response.status_code < 400:
        return
    response.read()
    raw_text = response.text
    body: Any = None
    if raw_text:
        try:
            body = json.loads(raw_text)
        except ValueError as exc:
            log_event(
                logger,
                "response.error_body_unparseable",
                ctx,
                level=logging.DEBUG,
                status_code=response.status_code,
                error=str(exc),
            )
    raise make_status_error(response, body=body, raw_text=raw_text)


def check_content_type(response: httpx.Response, *, stream: bool) -> None:
    """Validate the content type of a successful response.

    Structured calls require ``application/json``; streaming calls accept
    ``text/event-stream`` or ``application/json``. 204 is exempt.
    """
    if response.status_code == 204:
        return
    content_type = response.headers.get("content-type", "")
    lowered = content_type.lower()
    allowed = (EVENT_STREAM_CONTENT_TYPE, JSON_CONTENT_TYPE) if stream else (JSON_CONTENT_TYPE,)
    if not lowered.startswith(allowed):
        expected = " or ".join(allowed)
        raise ResponseValidationError(
            f"expected content type {expected}, got {content_type or '<none>'!r}",
            content_type=content_type or None,
        )


def decode_response(response: httpx.Response, cast_to: Optional[Type[M]]) -> Any:
    """Decode a successful, fully-read response.

    Returns ``None`` for 204 or an empty body, plain JSON when ``cast_to`` is
    ``None``, and a validated ``cast_to`` instance otherwise.

    Raises:
        DecodeError: the body is not valid JSON or does not match ``cast_to``.
    """
    if response.status_code == 204 or not response.content:
        return None
    if cast_to is None:
        try:
            return json.loads(response.content)
        except ValueError as exc:
            raise DecodeError(f"response body is not valid JSON: {exc}") from exc
    try:
        return cast_to.model_validate_json(response.content)
    except ValidationError as exc:
        raise DecodeError(f"could not decode {cast_to.__name__}: {exc}") from exc


__all__ = ["raise_for_status", "check_content_type", "decode_response"]
