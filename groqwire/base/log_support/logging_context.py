"""Structured logging context for request events.

:class:`LogContext` carries the fields shared by every event emitted for one
HTTP call (method, path, idempotency key) and an ``extra`` mapping. ``to_dict``
merges ``extra`` and prunes ``None`` values.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for request logging events."""

    method: Optional[str] = None
    path: Optional[str] = None
    request_id: Optional[str] = None
    idempotency_key: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
