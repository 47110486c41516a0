"""Pytest configuration for the groqwire test suite.

Provides a ``make_client`` factory that wires a :class:`groqwire.Groq`
instance to an ``httpx.MockTransport`` so transport behaviour can be checked
without network access, and keeps the process environment free of real
``GROQ_*`` settings.
"""

from __future__ import annotations

import time
from typing import Callable, Iterator, List

import httpx
import pytest

from groqwire import Groq
from groqwire.base.http import close_all_clients
from groqwire.config.env import (
    API_KEY_ENV,
    BASE_URL_ENV,
    CONNECT_TIMEOUT_ENV,
    MAX_RETRIES_ENV,
    TIMEOUT_ENV,
)

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Strip GROQ_* variables so host settings never leak into tests."""

    for name in (API_KEY_ENV, BASE_URL_ENV, MAX_RETRIES_ENV, TIMEOUT_ENV, CONNECT_TIMEOUT_ENV):
        monkeypatch.delenv(name, raising=False)
    yield
    close_all_clients()


@pytest.fixture()
def no_sleep(monkeypatch: pytest.MonkeyPatch) -> List[float]:
    """Replace ``time.sleep`` with a recorder; returns the recorded delays."""

    delays: List[float] = []
    monkeypatch.setattr(time, "sleep", lambda seconds: delays.append(seconds))
    return delays


@pytest.fixture()
def make_client() -> Iterator[Callable[..., Groq]]:
    """Factory building a ``Groq`` client backed by a mock transport."""

    created: List[Groq] = []

    def _make(handler: Handler, **kwargs) -> Groq:
        kwargs.setdefault("api_key", "test-key")
        kwargs.setdefault("base_url", "https://api.test")
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        client = Groq(http_client=http_client, **kwargs)
        created.append(client)
        return client

    yield _make
    for client in created:
        client.close()
