"""Public entry point: the ``Groq`` client.

Usage::

    from groqwire import Groq

    with Groq() as client:  # reads GROQ_API_KEY
        completion = client.chat.completions.create(
            {"model": "llama-3.3-70b-versatile",
             "messages": [{"role": "user", "content": "hi"}]}
        )

Each instance holds an immutable :class:`ClientConfig` and one transport.
Unless an ``http_client`` is injected, the ``httpx.Client`` comes from the
shared pool, so instances pointed at the same endpoint reuse connections.
``close`` leaves pooled clients open for the other instances sharing them
and closes an injected ``http_client``, which the instance then owns.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from .base.http import get_httpx_client
from .base.timeouts import TimeoutConfig
from .config import ClientConfig, load_client_config
from .resources import Audio, Batches, Chat, Embeddings, Files, Models
from .transport import BaseClient


class Groq:
    """Synchronous Groq API client.

    Args:
        api_key: Bearer credential; falls back to ``GROQ_API_KEY``.
        base_url: API origin; falls back to ``GROQ_BASE_URL`` then the default.
        max_retries: Retries after the first attempt.
        timeout: Per-call timeout in seconds.
        connect_timeout: Connection timeout in seconds.
        default_headers: Headers sent on every request.
        default_query: Query parameters sent on every request.
        strict_validation: Reject successful responses with an unexpected
            content type.
        logger: Destination for structured request events.
        http_client: Use this ``httpx.Client`` instead of a pooled one; it is
            closed by :meth:`close`.

    Raises:
        GroqError: when no API key can be resolved.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        max_retries: Optional[int] = None,
        timeout: Optional[float] = None,
        connect_timeout: Optional[float] = None,
        default_headers: Optional[Mapping[str, str]] = None,
        default_query: Optional[Mapping[str, Any]] = None,
        strict_validation: Optional[bool] = None,
        logger: Optional[logging.Logger] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self._config = load_client_config(
            api_key=api_key,
            base_url=base_url,
            max_retries=max_retries,
            timeout=timeout,
            connect_timeout=connect_timeout,
            default_headers=default_headers,
            default_query=default_query,
            strict_validation=strict_validation,
            logger=logger,
        )
        owns_client = http_client is not None
        if http_client is None:
            http_client = get_httpx_client(
                self._config.base_url,
                "api",
                TimeoutConfig(self._config.timeout, self._config.connect_timeout),
            )
        self._transport = BaseClient(self._config, http_client, owns_client=owns_client)

        self.chat = Chat(self._transport)
        self.embeddings = Embeddings(self._transport)
        self.audio = Audio(self._transport)
        self.batches = Batches(self._transport)
        self.files = Files(self._transport)
        self.models = Models(self._transport)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def transport(self) -> BaseClient:
        """Low-level transport, for endpoints without a resource wrapper."""
        return self._transport

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "Groq":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Groq({self._config!r})"


__all__ = ["Groq"]
