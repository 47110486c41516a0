"""Client configuration layer.

Goals
-----
* Centralize defaults (base URL, retry counts, timeouts).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults (``groqwire.config.defaults``)
    2. Environment variables (``GROQ_API_KEY``, ``GROQ_BASE_URL``,
       ``GROQ_MAX_RETRIES``, ``GROQ_TIMEOUT_SECONDS``,
       ``GROQ_CONNECT_TIMEOUT_SECONDS``)
    3. Explicit overrides passed by the caller (``None`` means "not given")
* Produce one immutable :class:`ClientConfig`; nothing is re-read after
  construction.

The logger is never derived from the environment. Callers inject one; the
default is the library ``groqwire`` logger.

Public API
----------
* ClientConfig
* load_client_config(**overrides) -> ClientConfig
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..base.constants import MISSING_API_KEY_ERROR
from ..base.errors import GroqError
from .defaults import (
    DEFAULT_BASE_URL,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
)
from .env import API_KEY_ENV, env_overrides


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client settings shared by every request.

    Attributes:
        api_key: Bearer credential sent on every request.
        base_url: API origin; paths are joined onto it.
        max_retries: Retries after the first attempt (total calls = n + 1).
        timeout: Per-call timeout in seconds.
        connect_timeout: Connection establishment timeout in seconds.
        default_headers: Headers added to every request (request headers win).
        default_query: Query parameters added to every request (request query wins).
        strict_validation: Reject successful responses whose content type
            does not match the call shape.
        logger: Destination for structured request events.
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    max_retries: int = DEFAULT_MAX_RETRIES
    timeout: float = DEFAULT_TIMEOUT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    default_headers: Mapping[str, str] = field(default_factory=dict)
    default_query: Mapping[str, Any] = field(default_factory=dict)
    strict_validation: bool = False
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("groqwire"))

    def __repr__(self) -> str:
        return (
            f"ClientConfig(base_url={self.base_url!r}, max_retries={self.max_retries}, "
            f"timeout={self.timeout}, connect_timeout={self.connect_timeout}, "
            f"strict_validation={self.strict_validation}, api_key='***')"
        )


def load_client_config(**overrides: Any) -> ClientConfig:
    """Return the merged :class:`ClientConfig`.

    Merge order (later wins): defaults -> environment -> overrides. Override
    values of ``None`` are ignored so callers can forward optional arguments
    unchanged.

    Raises:
        GroqError: when no API key is available from any source.
        TypeError: for unknown override names.
    """
    unknown = set(overrides) - set(ClientConfig.__dataclass_fields__)
    if unknown:
        raise TypeError(f"unknown client option(s): {', '.join(sorted(unknown))}")

    cfg: Dict[str, Any] = {}
    cfg |= env_overrides()
    cfg |= {k: v for k, v in overrides.items() if v is not None}

    if not cfg.get("api_key"):
        raise GroqError(
            f"{MISSING_API_KEY_ERROR}: API key required; pass api_key or set {API_KEY_ENV}"
        )
    if "default_headers" in cfg:
        cfg["default_headers"] = dict(cfg["default_headers"])
    if "default_query" in cfg:
        cfg["default_query"] = dict(cfg["default_query"])
    if cfg.get("max_retries", 0) < 0:
        raise ValueError("max_retries must be >= 0")
    return ClientConfig(**cfg)


__all__ = ["ClientConfig", "load_client_config"]
