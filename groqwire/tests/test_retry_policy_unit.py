"""Unit tests for status-driven retries and backoff calculation."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from email.utils import format_datetime

import httpx
import pytest

from groqwire.base.cancellation import CancellationToken, CancelledError
from groqwire.base.resilience.retry import (
    RetryConfig,
    calculate_backoff,
    default_should_retry,
    do_with_retry,
)


class _Body(httpx.SyncByteStream):
    def __iter__(self):
        yield b""


class _Sequence:
    """Returns the queued statuses in order, repeating the last one."""

    def __init__(self, *statuses: int, headers=None):
        self.statuses = list(statuses)
        self.headers = headers or {}
        self.calls = 0
        self.responses = []

    def __call__(self) -> httpx.Response:
        status = self.statuses[min(self.calls, len(self.statuses) - 1)]
        self.calls += 1
        response = httpx.Response(status, headers=self.headers, stream=_Body())
        self.responses.append(response)
        return response


def test_retries_until_success(no_sleep):
    send = _Sequence(500, 500, 200)
    response = do_with_retry(send, RetryConfig(max_retries=3))

    assert response.status_code == 200  # nosec B101 - asserts are appropriate in unit tests
    assert send.calls == 3  # nosec B101 - asserts are appropriate in unit tests
    assert len(no_sleep) == 2  # nosec B101 - asserts are appropriate in unit tests
    assert all(r.is_closed for r in send.responses[:2])  # nosec B101 - discarded responses are closed


def test_exhausted_retries_return_last_response(no_sleep):
    send = _Sequence(500)
    response = do_with_retry(send, RetryConfig(max_retries=2))

    assert send.calls == 3  # nosec B101 - one call plus two retries
    assert response.status_code == 500  # nosec B101 - asserts are appropriate in unit tests
    assert not response.is_closed  # nosec B101 - caller still classifies it


def test_non_retryable_status_returns_immediately(no_sleep):
    send = _Sequence(400, 200)
    response = do_with_retry(send, RetryConfig(max_retries=5))
    assert response.status_code == 400 and send.calls == 1  # nosec B101 - asserts are appropriate in unit tests
    assert no_sleep == []  # nosec B101 - asserts are appropriate in unit tests


def test_zero_retries_calls_once(no_sleep):
    send = _Sequence(503)
    do_with_retry(send, RetryConfig(max_retries=0))
    assert send.calls == 1  # nosec B101 - asserts are appropriate in unit tests


def test_exceptions_from_send_propagate_without_retry():
    calls = []

    def send():
        calls.append(1)
        raise ConnectionError("reset")

    with pytest.raises(ConnectionError):
        do_with_retry(send, RetryConfig(max_retries=3))
    assert len(calls) == 1  # nosec B101 - asserts are appropriate in unit tests


def test_retry_after_header_drives_delay(no_sleep):
    send = _Sequence(429, 200, headers={"retry-after": "10"})
    do_with_retry(send, RetryConfig(max_retries=1))
    assert no_sleep == [10.0]  # nosec B101 - asserts are appropriate in unit tests


def test_attempt_logger_receives_each_attempt(no_sleep):
    entries = []
    send = _Sequence(502, 200)
    do_with_retry(send, RetryConfig(max_retries=2, attempt_logger=lambda **kw: entries.append(kw)))

    assert [e["status_code"] for e in entries] == [502, 200]  # nosec B101 - asserts are appropriate in unit tests
    assert entries[0]["delay"] is not None and entries[1]["delay"] is None  # nosec B101 - asserts are appropriate in unit tests
    assert entries[0]["max_attempts"] == 3  # nosec B101 - asserts are appropriate in unit tests


@pytest.mark.parametrize(
    "status,expected",
    [(408, True), (409, True), (429, True), (500, True), (503, True), (400, False), (404, False)],
)
def test_default_should_retry_statuses(status, expected):
    assert default_should_retry(httpx.Response(status)) is expected  # nosec B101 - asserts are appropriate in unit tests


def test_x_should_retry_header_overrides_status():
    assert default_should_retry(httpx.Response(400, headers={"x-should-retry": "true"}))  # nosec B101 - asserts are appropriate in unit tests
    assert not default_should_retry(httpx.Response(503, headers={"x-should-retry": "false"}))  # nosec B101 - asserts are appropriate in unit tests


def test_backoff_honours_retry_after_date():
    now = datetime(2025, 1, 1, tzinfo=timezone.utc)
    later = format_datetime(now + timedelta(seconds=30), usegmt=True)
    delay = calculate_backoff(0, httpx.Response(429, headers={"retry-after": later}), now=now)
    assert delay == pytest.approx(30.0)  # nosec B101 - asserts are appropriate in unit tests


def test_backoff_ignores_out_of_range_retry_after():
    delay = calculate_backoff(0, httpx.Response(429, headers={"retry-after": "3600"}), initial_delay=0.5)
    assert 0.375 <= delay <= 0.5  # nosec B101 - falls back to jittered exponential delay


def test_backoff_uses_retry_after_ms():
    delay = calculate_backoff(0, httpx.Response(429, headers={"retry-after-ms": "250"}))
    assert delay == pytest.approx(0.25)  # nosec B101 - asserts are appropriate in unit tests


def test_backoff_grows_and_is_capped():
    for attempt in range(4):
        delay = calculate_backoff(attempt, initial_delay=0.5, max_delay=8.0)
        nominal = min(8.0, 0.5 * 2**attempt)
        assert nominal * 0.75 <= delay <= nominal  # nosec B101 - asserts are appropriate in unit tests
    assert calculate_backoff(20, initial_delay=0.5, max_delay=8.0) <= 8.0  # nosec B101 - asserts are appropriate in unit tests


def test_pre_cancelled_token_prevents_any_attempt():
    token = CancellationToken()
    token.cancel("stop")
    send = _Sequence(200)
    with pytest.raises(CancelledError):
        do_with_retry(send, RetryConfig(), token)
    assert send.calls == 0  # nosec B101 - asserts are appropriate in unit tests


def test_cancel_during_backoff_wait_aborts():
    token = CancellationToken()
    send = _Sequence(500)
    token.cancel_after(0.05, "abort")
    config = RetryConfig(max_retries=3, initial_delay=5.0, max_delay=5.0)
    with pytest.raises(CancelledError):
        do_with_retry(send, config, token)
    assert send.calls == 1  # nosec B101 - the 5s wait was interrupted
