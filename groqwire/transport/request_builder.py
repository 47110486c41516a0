"""Request construction: URL joining, query merging and header layering.

Header precedence (later wins)
------------------------------
1. ``Accept`` and ``Content-Type`` (``application/json``; the content type
   is left to httpx for multipart calls so it can add the boundary)
2. ``User-Agent`` and ``Authorization``
3. Platform headers (``X-Stainless-*``)
4. Client default headers
5. Per-request headers
6. ``Idempotency-Key`` from the request options

Header names are matched case-insensitively when layering (``httpx.Headers``).
"""
from __future__ import annotations

import functools
import platform
from typing import Any, Dict, Mapping, Optional

import httpx

from ..base.constants import JSON_CONTENT_TYPE, USER_AGENT_PRODUCT, VERSION
from ..base.encoding.querystring import stringify
from ..base.options.request_options import RequestOptions
from ..config import ClientConfig


def join_url(base_url: str, path: str) -> str:
    """Join ``base_url`` and ``path`` with exactly one slash between them."""
    return base_url.rstrip("/") + "/" + path.lstrip("/")


def merge_query(default: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    merged = dict(default)
    merged.update(override)
    return merged


def build_url(base_url: str, path: str, query: Optional[Mapping[str, Any]] = None) -> str:
    """Return the absolute URL, with a deterministic query string when non-empty."""
    url = join_url(base_url, path)
    encoded = stringify(query) if query else ""
    return f"{url}?{encoded}" if encoded else url


@functools.lru_cache(maxsize=1)
def platform_headers() -> Dict[str, str]:
    """Static client-environment headers (computed once per process)."""
    return {
        "X-Stainless-Lang": "python",
        "X-Stainless-Package-Version": VERSION,
        "X-Stainless-OS": platform.system() or "unknown",
        "X-Stainless-Arch": platform.machine() or "unknown",
        "X-Stainless-Runtime": platform.python_implementation(),
        "X-Stainless-Runtime-Version": platform.python_version(),
    }


def build_headers(
    config: ClientConfig,
    options: RequestOptions,
    *,
    form: bool = False,
) -> httpx.Headers:
    headers = httpx.Headers({"Accept": JSON_CONTENT_TYPE})
    if not form:
        headers["Content-Type"] = JSON_CONTENT_TYPE
    headers["User-Agent"] = f"{USER_AGENT_PRODUCT}/Python {VERSION}"
    headers["Authorization"] = f"Bearer {config.api_key}"
    headers.update(platform_headers())
    headers.update(config.default_headers)
    headers.update(options.headers)
    if options.idempotency_key:
        headers["Idempotency-Key"] = options.idempotency_key
    if form:
        # A caller-supplied content type would drop the multipart boundary.
        headers.pop("Content-Type", None)
    return headers


__all__ = [
    "join_url",
    "merge_query",
    "build_url",
    "platform_headers",
    "build_headers",
]
