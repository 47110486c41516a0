"""Timeout configuration for HTTP calls.

Centralizes how the client's timeout settings map onto ``httpx.Timeout`` so
the connection pool and per-request overrides stay consistent.

TimeoutConfig
    Frozen dataclass with the overall request timeout and the connect
    timeout (seconds). ``to_httpx`` converts it; ``with_overall`` derives a
    copy for a per-request override.
"""
from __future__ import annotations

from dataclasses import dataclass, replace

import httpx

from ..config.defaults import DEFAULT_CONNECT_TIMEOUT, DEFAULT_TIMEOUT


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        timeout_seconds: Read/write/pool timeout for a single HTTP call.
            For streams this bounds the wait for each chunk, not the whole
            stream.
        connect_timeout_seconds: Timeout for establishing the connection.
    """

    timeout_seconds: float = DEFAULT_TIMEOUT
    connect_timeout_seconds: float = DEFAULT_CONNECT_TIMEOUT

    def to_httpx(self) -> httpx.Timeout:
        return httpx.Timeout(self.timeout_seconds, connect=self.connect_timeout_seconds)

    def with_overall(self, seconds: float | None) -> "TimeoutConfig":
        """Return a copy whose overall timeout is ``seconds`` (unchanged when ``None``)."""
        if seconds is None:
            return self
        return replace(self, timeout_seconds=seconds)


__all__ = ["TimeoutConfig"]
