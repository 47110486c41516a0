"""Shared HTTP client pool.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances so every ``Groq`` client pointing at the same endpoint shares
    keep-alive connections instead of allocating a pool per instance.

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Pool settings:
    - Connection limits come from ``groqwire.config.defaults``
      (100 connections, 20 keep-alive, 90 s idle expiry).
    - The client's default timeout is the :class:`TimeoutConfig` supplied on
      first creation; the transport still passes an explicit timeout on every
      request so per-request overrides apply.

Lifecycle & cleanup:
    - Clients are cached by ``(base_url, purpose, timeout, connect_timeout)``.
      Purposes allow distinct pools (e.g. "api" vs "upload").
    - All clients are closed at interpreter exit via ``atexit``. Tests may
      call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Optional, Tuple

import httpx

from ...config.defaults import (
    KEEPALIVE_EXPIRY,
    MAX_CONNECTIONS,
    MAX_KEEPALIVE_CONNECTIONS,
)
from ..timeouts import TimeoutConfig

_ClientKey = Tuple[Optional[str], str, float, float]

_CLIENTS: Dict[_ClientKey, httpx.Client] = {}
_LOCK = threading.RLock()


def _limits() -> httpx.Limits:
    return httpx.Limits(
        max_connections=MAX_CONNECTIONS,
        max_keepalive_connections=MAX_KEEPALIVE_CONNECTIONS,
        keepalive_expiry=KEEPALIVE_EXPIRY,
    )


def get_httpx_client(
    base_url: Optional[str],
    purpose: str,
    timeouts: Optional[TimeoutConfig] = None,
) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given key.

    Parameters:
        base_url: API base URL the client is associated with. Only used as
            part of the cache key; the transport always sends absolute URLs.
        purpose: Short string discriminating separate pools. Keep stable to
            maximize reuse.
        timeouts: Default timeouts for the client (library defaults when
            omitted).

    Returns:
        A reusable ``httpx.Client`` instance.

    Thread-safety:
        Safe for concurrent use; per-key creation is guarded by a re-entrant
        lock.
    """
    cfg = timeouts or TimeoutConfig()
    key = (base_url, purpose, cfg.timeout_seconds, cfg.connect_timeout_seconds)
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        client = httpx.Client(timeout=cfg.to_httpx(), limits=_limits())
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            c.close()
        _CLIENTS.clear()


def _cleanup_at_exit() -> None:
    """atexit hook to ensure clients are closed on interpreter exit."""
    close_all_clients()


atexit.register(_cleanup_at_exit)

__all__ = ["get_httpx_client", "close_all_clients"]
