"""Typed, cancellable stream over an event-stream HTTP response.

``Stream[T]`` owns one open ``httpx.Response`` and one decode pipeline
(``SSEDecoder``). Each pull returns the next payload validated as ``T``.

Lifecycle
---------
``OPEN`` -> ``DONE`` (``[DONE]`` sentinel, end of body, or ``close()``) or
``OPEN`` -> ``ERRORED`` (decode, transport, server error frame, or a
cancellation that interrupted a read). Transitions are one-way. Entering a
terminal state closes the response; every later pull raises
``StopIteration``.

Cancellation
------------
A token cancelled before a pull raises ``CancelledError`` without consuming
an event and leaves the stream open. While a pull is blocked on the socket,
the token's callback closes the response; the interrupted read surfaces as
``CancelledError`` and the stream becomes ``ERRORED``.

Concurrency
-----------
Single consumer. Concurrent ``next_item`` calls on one instance are not
supported and are not guarded.
"""
from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, Generic, Iterator, Optional, Type, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from ..cancellation import CancellationToken, CancelledError
from ..constants import STREAM_DONE_SENTINEL
from ..errors import APIStreamError, DecodeError, GroqError, from_httpx_error
from ..logging import normalized_log_event
from .sse_decoder import SSEDecoder, ServerSentEvent

T = TypeVar("T")


class StreamState(str, Enum):
    OPEN = "open"
    DONE = "done"
    ERRORED = "errored"


def _stream_error_message(body: Any, raw: str) -> str:
    if isinstance(body, dict):
        err = body.get("error")
        if isinstance(err, dict) and isinstance(err.get("message"), str):
            return err["message"]
        if isinstance(body.get("message"), str):
            return body["message"]
    return raw or "stream error"


class Stream(Generic[T]):
    """Pull-based iterator of ``T`` values decoded from an SSE response."""

    def __init__(
        self,
        response: httpx.Response,
        cast_to: Optional[Type[T]],
        *,
        decoder: Optional[SSEDecoder] = None,
        token: Optional[CancellationToken] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.response = response
        self._adapter: Optional[TypeAdapter[T]] = TypeAdapter(cast_to) if cast_to is not None else None
        self._decoder = decoder or SSEDecoder()
        self._events: Iterator[ServerSentEvent] = self._decoder.decode(response.iter_bytes())
        self._token = token
        self._logger = logger or logging.getLogger("groqwire")
        self._state = StreamState.OPEN
        self._closed = False
        self._emitted = 0

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def emitted(self) -> int:
        """Number of payloads delivered so far."""
        return self._emitted

    # ------------------------------------------------------------------ pull
    def next_item(self, token: Optional[CancellationToken] = None) -> T:
        """Return the next payload.

        Raises:
            StopIteration: the stream is finished (sentinel, end of body,
                closed, or previously errored).
            CancelledError: ``token`` (or the stream's default token) fired.
            DecodeError: a payload was not valid for ``T``.
            APIStreamError: the server sent an ``error`` event.
            TransportError: the connection failed mid-stream.
        """
        token = token if token is not None else self._token
        if self._state is not StreamState.OPEN:
            raise StopIteration
        if token is not None:
            token.raise_if_cancelled()
        unregister = token.register(self._interrupt) if token is not None else None
        try:
            return self._pull(token)
        finally:
            if unregister is not None:
                unregister()

    def _pull(self, token: Optional[CancellationToken]) -> T:
        while True:
            sse = self._read_event(token)
            if sse.data.startswith(STREAM_DONE_SENTINEL):
                self._finish(StreamState.DONE)
                raise StopIteration
            if sse.event == "error":
                self._raise_error_event(sse)
            if not sse.data:
                continue
            item = self._decode(sse)
            self._emitted += 1
            return item

    def _read_event(self, token: Optional[CancellationToken]) -> ServerSentEvent:
        try:
            return next(self._events)
        except StopIteration:
            if token is not None and token.cancelled:
                self._finish(StreamState.ERRORED)
                raise CancelledError(token.reason or "stream cancelled") from None
            self._finish(StreamState.DONE)
            raise
        except GroqError:
            self._finish(StreamState.ERRORED)
            raise
        except Exception as exc:
            self._finish(StreamState.ERRORED)
            if token is not None and token.cancelled:
                raise CancelledError(token.reason or "stream cancelled") from exc
            mapped = from_httpx_error(exc, "stream read")
            if mapped is exc:
                raise
            raise mapped from exc

    def _decode(self, sse: ServerSentEvent) -> T:
        if self._adapter is None:
            try:
                return json.loads(sse.data)
            except ValueError as exc:
                self._decode_failed(exc)
                raise DecodeError(f"invalid JSON in stream payload: {exc}") from exc
        try:
            return self._adapter.validate_json(sse.data)
        except ValidationError as exc:
            self._decode_failed(exc)
            raise DecodeError(f"could not decode stream payload: {exc}") from exc

    def _decode_failed(self, exc: Exception) -> None:
        self._finish(StreamState.ERRORED)
        normalized_log_event(
            self._logger,
            "stream.decode_error",
            phase="stream",
            error_code="decode",
            emitted=self._emitted > 0,
            level=logging.WARNING,
            error=str(exc),
        )

    def _raise_error_event(self, sse: ServerSentEvent) -> None:
        try:
            body: Any = json.loads(sse.data) if sse.data else None
        except ValueError:
            body = None
        self._finish(StreamState.ERRORED)
        raise APIStreamError(_stream_error_message(body, sse.data), body=body)

    # ------------------------------------------------------------- lifecycle
    def _interrupt(self) -> None:
        self.response.close()

    def _finish(self, state: StreamState) -> None:
        if self._state is StreamState.OPEN:
            self._state = state
            normalized_log_event(
                self._logger,
                "stream.end",
                phase="finalize",
                emitted=self._emitted > 0,
                level=logging.DEBUG,
                state=state.value,
                items=self._emitted,
            )
        self.close()

    def close(self) -> None:
        """Release the response; idempotent and safe before any pull."""
        if self._state is StreamState.OPEN:
            self._finish(StreamState.DONE)
            return
        if self._closed:
            return
        self._closed = True
        self.response.close()

    # -------------------------------------------------------------- protocol
    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return self.next_item()

    def __enter__(self) -> "Stream[T]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"Stream(state={self._state.value}, emitted={self._emitted})"


__all__ = ["Stream", "StreamState"]
