"""Deterministic query-string serialization.

Rules
-----
- Keys are emitted in sorted order; nested mappings flatten to
  ``parent[child]`` (children sorted as well).
- Lists and tuples become a single comma-joined value (``ids=a%2Cb``).
- ``bool`` renders as ``true`` / ``false``; ``datetime`` as RFC 3339.
- ``None`` and unset ``Opt`` values are skipped; set ``Opt`` values unwrap.
- Keys and joined values are escaped with ``quote_plus``.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Mapping
from urllib.parse import quote_plus

from ..options.optional import Opt


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Opt):
        return _scalar(value.value)
    return str(value)


def _flatten(out: Dict[str, List[str]], value: Any, key: str) -> None:
    if isinstance(value, Opt):
        if not value.is_set:
            return
        value = value.value
    if value is None:
        return
    if isinstance(value, Mapping):
        for sub in sorted(value, key=str):
            _flatten(out, value[sub], f"{key}[{sub}]")
        return
    if isinstance(value, (list, tuple)):
        out.setdefault(key, []).extend(_scalar(v) for v in value if v is not None)
        return
    out.setdefault(key, []).append(_scalar(value))


def stringify(params: Mapping[str, Any] | None) -> str:
    """Encode ``params`` as a query string (without the leading ``?``).

    Raises:
        TypeError: when ``params`` is not a mapping.
    """
    if params is None:
        return ""
    if not isinstance(params, Mapping):
        raise TypeError(f"query parameters must be a mapping, got {type(params).__name__}")
    values: Dict[str, List[str]] = {}
    for key in params:
        _flatten(values, params[key], str(key))
    return "&".join(
        f"{quote_plus(k)}={quote_plus(','.join(values[k]))}" for k in sorted(values)
    )


__all__ = ["stringify"]
