"""Base shared constants for the client library.

Central location to avoid scattering magic strings and version literals
across the transport and resource layers.

Security
--------
This module contains only generic sentinel strings. There are no credentials
or tokens embedded.

# pragma: allowlist secret
"""
from __future__ import annotations

# Library version reported in ``User-Agent`` and platform headers
VERSION = "0.1.0a0"

# Product token used to build the ``User-Agent`` header
USER_AGENT_PRODUCT = "groqwire"

# Missing credential sentinel
MISSING_API_KEY_ERROR = "missing_api_key"  # pragma: allowlist secret - generic placeholder string, not a real secret

# Logical end-of-stream payload sent by the server as the last SSE data frame
STREAM_DONE_SENTINEL = "[DONE]"

# Content types accepted by strict response validation
JSON_CONTENT_TYPE = "application/json"
EVENT_STREAM_CONTENT_TYPE = "text/event-stream"

# Common prefix for every API route
API_PREFIX = "/openai/v1"

__all__ = [
    "VERSION",
    "USER_AGENT_PRODUCT",
    "MISSING_API_KEY_ERROR",
    "STREAM_DONE_SENTINEL",
    "JSON_CONTENT_TYPE",
    "EVENT_STREAM_CONTENT_TYPE",
    "API_PREFIX",
]
