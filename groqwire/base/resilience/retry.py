"""Status-driven retry with exponential backoff.

Policy
------
- ``send`` is called at most ``max_retries + 1`` times. Exceptions raised by
  ``send`` (transport failures) propagate immediately and are never retried.
- A response is retried when ``should_retry`` says so. The default honours an
  explicit ``x-should-retry: true|false`` header and otherwise retries 408,
  409, 429 and any status >= 500.
- The wait before the next attempt comes from server hints when present
  (``Retry-After`` seconds or HTTP-date within 60 s, then ``Retry-After-Ms``)
  and otherwise from capped exponential backoff with up to 25% jitter.
- Discarded responses are closed before waiting. When retries run out the
  last response is returned unchanged for the caller to classify.
- A cancellation token is checked before every attempt and after every
  attempt, and interrupts the backoff wait.
"""
from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Callable, Optional, Protocol

import httpx

from ...config.defaults import (
    DEFAULT_MAX_RETRIES,
    INITIAL_RETRY_DELAY,
    MAX_RETRY_AFTER_SECONDS,
    MAX_RETRY_DELAY,
)
from ..cancellation import CancellationToken, CancelledError

RETRYABLE_STATUS_CODES = frozenset({408, 409, 429})


class AttemptLogger(Protocol):  # pragma: no cover - structural protocol
    def __call__(
        self,
        *,
        attempt: int,
        max_attempts: int,
        delay: float | None,
        status_code: int | None,
    ) -> None: ...


def default_should_retry(response: httpx.Response) -> bool:
    """Return True when ``response`` warrants another attempt."""
    override = response.headers.get("x-should-retry")
    if override:
        return override.strip().lower() == "true"
    status = response.status_code
    return status in RETRYABLE_STATUS_CODES or status >= 500


def _retry_after_seconds(value: str, now: datetime) -> Optional[float]:
    value = value.strip()
    try:
        seconds = int(value)
    except ValueError:
        seconds = None
    if seconds is not None:
        return float(seconds) if 0 < seconds <= MAX_RETRY_AFTER_SECONDS else None
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    delta = (when - now).total_seconds()
    return delta if 0 < delta <= MAX_RETRY_AFTER_SECONDS else None


def calculate_backoff(
    attempt: int,
    response: Optional[httpx.Response] = None,
    *,
    initial_delay: float = INITIAL_RETRY_DELAY,
    max_delay: float = MAX_RETRY_DELAY,
    now: Optional[datetime] = None,
) -> float:
    """Return the delay in seconds before retry number ``attempt + 1``.

    ``attempt`` is zero-based (0 after the first failed call).
    """
    if response is not None:
        retry_after = response.headers.get("retry-after")
        if retry_after:
            delay = _retry_after_seconds(retry_after, now or datetime.now(timezone.utc))
            if delay is not None:
                return delay
        retry_after_ms = response.headers.get("retry-after-ms")
        if retry_after_ms:
            try:
                ms = int(retry_after_ms.strip())
            except ValueError:
                ms = -1
            if ms >= 0:
                return ms / 1000.0
    base = min(max_delay, initial_delay * (2**attempt))
    jitter = 1 - 0.25 * random.random()  # nosec B311 - jitter, not crypto
    return base * jitter


@dataclass(frozen=True)
class RetryConfig:
    max_retries: int = DEFAULT_MAX_RETRIES
    initial_delay: float = INITIAL_RETRY_DELAY
    max_delay: float = MAX_RETRY_DELAY
    should_retry: Callable[[httpx.Response], bool] = field(default=default_should_retry)
    attempt_logger: AttemptLogger | None = None

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def backoff(self, attempt: int, response: Optional[httpx.Response]) -> float:
        return calculate_backoff(
            attempt,
            response,
            initial_delay=self.initial_delay,
            max_delay=self.max_delay,
        )


DEFAULT_RETRY_CONFIG = RetryConfig()


def _raise_cancelled(token: CancellationToken) -> None:
    raise CancelledError(token.reason or "request cancelled")


def do_with_retry(
    send: Callable[[], httpx.Response],
    config: RetryConfig = DEFAULT_RETRY_CONFIG,
    token: Optional[CancellationToken] = None,
) -> httpx.Response:
    """Call ``send`` until it yields a non-retryable response or retries run out.

    Returns:
        The final ``httpx.Response`` (possibly an error status; classification
        is the caller's job).

    Raises:
        CancelledError: ``token`` fired before an attempt, during an attempt
            or during a backoff wait. Any in-flight response is closed.
        Exception: whatever ``send`` raises, unchanged.
    """
    attempt = 0
    while True:
        if token is not None and token.cancelled:
            _raise_cancelled(token)
        response = send()
        if token is not None and token.cancelled:
            response.close()
            _raise_cancelled(token)

        retry = attempt < config.max_retries and config.should_retry(response)
        delay = config.backoff(attempt, response) if retry else None
        if config.attempt_logger:
            config.attempt_logger(
                attempt=attempt,
                max_attempts=config.max_attempts,
                delay=delay,
                status_code=response.status_code,
            )
        if not retry:
            return response

        response.close()
        if token is not None:
            if token.wait(delay):
                _raise_cancelled(token)
        else:
            time.sleep(delay)
        attempt += 1


__all__ = [
    "AttemptLogger",
    "RetryConfig",
    "DEFAULT_RETRY_CONFIG",
    "RETRYABLE_STATUS_CODES",
    "default_should_retry",
    "calculate_backoff",
    "do_with_retry",
]
