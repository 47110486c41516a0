"""Unit tests for the typed, cancellable ``Stream`` wrapper.

Exercises the terminal states (sentinel, end of body, error frame, decode
failure), pre-pull and mid-read cancellation, and idempotent close.
"""
from __future__ import annotations

import threading
import time

import httpx
import pytest

from groqwire.base.cancellation import CancellationToken, CancelledError
from groqwire.base.errors import APIStreamError, DecodeError, TransportError
from groqwire.base.streaming import Stream, StreamState
from groqwire.types.chat import ChatCompletionChunk

_CHUNK = b'data: {"id": "c1", "choices": [{"index": 0, "delta": {"content": "Hel"}}]}\n\n'
_CHUNK2 = b'data: {"id": "c1", "choices": [{"index": 0, "delta": {"content": "lo"}}]}\n\n'


def _response(body: bytes) -> httpx.Response:
    return httpx.Response(200, headers={"content-type": "text/event-stream"}, content=body)


class _BlockingStream(httpx.SyncByteStream):
    """Yields one event then blocks until closed (or a safety timeout)."""

    def __init__(self) -> None:
        self.closed = threading.Event()

    def __iter__(self):
        yield _CHUNK
        self.closed.wait(5)

    def close(self) -> None:
        self.closed.set()


class _FailingStream(httpx.SyncByteStream):
    """Yields one event, then the connection drops."""

    def __init__(self) -> None:
        self.reads = 0

    def __iter__(self):
        self.reads += 1
        yield _CHUNK
        raise httpx.ReadError("connection reset by peer")


def test_iterates_chunks_until_done_sentinel():
    stream = Stream(_response(_CHUNK + _CHUNK2 + b"data: [DONE]\n\n" + _CHUNK), ChatCompletionChunk)
    contents = [chunk.choices[0].delta.content for chunk in stream]

    assert contents == ["Hel", "lo"]  # nosec B101 - events after [DONE] are never decoded
    assert stream.state is StreamState.DONE  # nosec B101 - asserts are appropriate in unit tests
    assert stream.response.is_closed  # nosec B101 - asserts are appropriate in unit tests
    assert stream.emitted == 2  # nosec B101 - asserts are appropriate in unit tests


def test_end_of_body_without_sentinel_is_done():
    stream = Stream(_response(_CHUNK), ChatCompletionChunk)
    assert len(list(stream)) == 1  # nosec B101 - asserts are appropriate in unit tests
    assert stream.state is StreamState.DONE  # nosec B101 - asserts are appropriate in unit tests


def test_keepalive_events_are_skipped():
    stream = Stream(_response(b": ping\n\nevent: ping\ndata:\n\n" + _CHUNK), None)
    assert [item["id"] for item in stream] == ["c1"]  # nosec B101 - asserts are appropriate in unit tests


def test_error_event_raises_and_terminates():
    body = _CHUNK + b'event: error\ndata: {"error": {"message": "overloaded"}}\n\n' + _CHUNK2
    stream = Stream(_response(body), ChatCompletionChunk)
    next(stream)
    with pytest.raises(APIStreamError) as ei:
        next(stream)
    assert str(ei.value) == "overloaded"  # nosec B101 - asserts are appropriate in unit tests
    assert ei.value.body == {"error": {"message": "overloaded"}}  # nosec B101 - asserts are appropriate in unit tests
    assert stream.state is StreamState.ERRORED  # nosec B101 - asserts are appropriate in unit tests
    with pytest.raises(StopIteration):
        stream.next_item()


def test_decode_failure_raises_decode_error(caplog):
    caplog.set_level("WARNING", logger="groqwire")
    stream = Stream(_response(b"data: {not json\n\n"), ChatCompletionChunk)
    with pytest.raises(DecodeError):
        next(stream)
    assert stream.state is StreamState.ERRORED  # nosec B101 - asserts are appropriate in unit tests
    assert any("stream.decode_error" in r.getMessage() for r in caplog.records)  # nosec B101 - asserts are appropriate in unit tests


def test_pre_cancelled_token_does_not_consume():
    token = CancellationToken()
    token.cancel("user abort")
    stream = Stream(_response(_CHUNK), ChatCompletionChunk)

    with pytest.raises(CancelledError):
        stream.next_item(token)
    assert stream.state is StreamState.OPEN  # nosec B101 - nothing was consumed
    assert stream.next_item().id == "c1"  # nosec B101 - asserts are appropriate in unit tests


def test_cancel_interrupts_blocked_read():
    body = _BlockingStream()
    response = httpx.Response(200, headers={"content-type": "text/event-stream"}, stream=body)
    token = CancellationToken()
    stream = Stream(response, ChatCompletionChunk, token=token)

    assert stream.next_item().id == "c1"  # nosec B101 - asserts are appropriate in unit tests
    token.cancel_after(0.05, "deadline")
    started = time.monotonic()
    with pytest.raises(CancelledError):
        stream.next_item()
    assert time.monotonic() - started < 4  # nosec B101 - woken by the cancel, not the safety timeout
    assert stream.state is StreamState.ERRORED  # nosec B101 - asserts are appropriate in unit tests
    assert body.closed.is_set()  # nosec B101 - asserts are appropriate in unit tests


def test_close_is_idempotent_and_stops_iteration():
    stream = Stream(_response(_CHUNK), ChatCompletionChunk)
    stream.close()
    stream.close()
    assert stream.state is StreamState.DONE  # nosec B101 - asserts are appropriate in unit tests
    assert list(stream) == []  # nosec B101 - asserts are appropriate in unit tests


def test_context_manager_closes_response():
    with Stream(_response(_CHUNK), ChatCompletionChunk) as stream:
        pass
    assert stream.response.is_closed  # nosec B101 - asserts are appropriate in unit tests


def test_mid_body_transport_error_surfaces_once():
    body = _FailingStream()
    response = httpx.Response(200, headers={"content-type": "text/event-stream"}, stream=body)
    stream = Stream(response, ChatCompletionChunk)

    assert stream.next_item().id == "c1"  # nosec B101 - asserts are appropriate in unit tests
    with pytest.raises(TransportError):
        stream.next_item()
    assert stream.state is StreamState.ERRORED  # nosec B101 - asserts are appropriate in unit tests
    assert stream.response.is_closed  # nosec B101 - asserts are appropriate in unit tests
    with pytest.raises(StopIteration):
        stream.next_item()
    assert body.reads == 1  # nosec B101 - the body is never re-read after the failure
