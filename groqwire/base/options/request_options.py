"""Per-request overrides.

``RequestOptions`` is passed to any resource method (``options=``) and is
merged over the client defaults at call time. Nothing here is persisted on
the client.

Merge rules
-----------
- ``headers`` / ``query``: request values win per key over client defaults.
- ``timeout`` / ``max_retries``: replace the client value when not ``None``.
- ``idempotency_key``: sent as ``Idempotency-Key`` after all other headers.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class RequestOptions:
    headers: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, Any] = field(default_factory=dict)
    timeout: Optional[float] = None
    max_retries: Optional[int] = None
    idempotency_key: Optional[str] = None

    def with_header(self, name: str, value: str) -> "RequestOptions":
        return replace(self, headers={**self.headers, name: value})

    def with_query(self, name: str, value: Any) -> "RequestOptions":
        return replace(self, query={**self.query, name: value})


DEFAULT_REQUEST_OPTIONS = RequestOptions()

__all__ = ["RequestOptions", "DEFAULT_REQUEST_OPTIONS"]
