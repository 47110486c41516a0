"""groqwire.config.env
===================

Environment variable names and small parsing helpers used when building a
``ClientConfig``.

Failure Modes
-------------
- Unset or blank variables resolve to ``None``.
- Numeric variables that do not parse, or are negative, are ignored (the
  caller falls back to the default) rather than raising.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

API_KEY_ENV = "GROQ_API_KEY"  # pragma: allowlist secret - env var name, not a secret
BASE_URL_ENV = "GROQ_BASE_URL"
MAX_RETRIES_ENV = "GROQ_MAX_RETRIES"
TIMEOUT_ENV = "GROQ_TIMEOUT_SECONDS"
CONNECT_TIMEOUT_ENV = "GROQ_CONNECT_TIMEOUT_SECONDS"


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the string looks like a placeholder rather than a real key.

    Heuristics: contains 'placeholder', 'changeme' or 'your_api_key'
    (case-insensitive, surrounding spaces ignored).
    """
    if val is None:
        return False
    lowered = val.strip().lower()
    return any(marker in lowered for marker in ("placeholder", "changeme", "your_api_key"))


def _get(name: str) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def _parse_float(name: str) -> Optional[float]:
    raw = _get(name)
    if raw is None:
        return None
    try:
        val = float(raw)
    except ValueError:
        return None
    return val if val > 0 else None


def _parse_int(name: str) -> Optional[int]:
    raw = _get(name)
    if raw is None:
        return None
    try:
        val = int(raw)
    except ValueError:
        return None
    return val if val >= 0 else None


def env_overrides() -> Dict[str, Any]:
    """Return config fields resolved from the environment (unset ones omitted)."""
    api_key = _get(API_KEY_ENV)
    values: Dict[str, Any] = {
        "api_key": None if is_placeholder(api_key) else api_key,
        "base_url": _get(BASE_URL_ENV),
        "max_retries": _parse_int(MAX_RETRIES_ENV),
        "timeout": _parse_float(TIMEOUT_ENV),
        "connect_timeout": _parse_float(CONNECT_TIMEOUT_ENV),
    }
    return {k: v for k, v in values.items() if v is not None}


__all__ = [
    "API_KEY_ENV",
    "BASE_URL_ENV",
    "MAX_RETRIES_ENV",
    "TIMEOUT_ENV",
    "CONNECT_TIMEOUT_ENV",
    "is_placeholder",
    "env_overrides",
]
