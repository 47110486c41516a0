"""groqwire.config.defaults
========================

Central place for the stable default values used by the client. They can be
overridden via environment variables or constructor arguments (see
``groqwire.config.load_client_config``).

This module intentionally avoids importing from other groqwire packages to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Endpoint ----
DEFAULT_BASE_URL = "https://api.groq.com"

# ---- Retry policy ----
DEFAULT_MAX_RETRIES = 2
# Exponential backoff starts here and doubles per attempt (seconds)
INITIAL_RETRY_DELAY = 0.5
# Upper bound for computed backoff (seconds)
MAX_RETRY_DELAY = 8.0
# Server ``Retry-After`` hints above this many seconds are ignored
MAX_RETRY_AFTER_SECONDS = 60.0

# ---- Timeouts (seconds) ----
DEFAULT_TIMEOUT = 60.0
DEFAULT_CONNECT_TIMEOUT = 5.0

# ---- Connection pool ----
MAX_CONNECTIONS = 100
MAX_KEEPALIVE_CONNECTIONS = 20
KEEPALIVE_EXPIRY = 90.0

# ---- Streaming ----
# Largest SSE field value guaranteed to decode (bytes)
SSE_MAX_PAYLOAD_BYTES = 1024 * 1024
# Line limit: the payload plus room for the field name and separator
SSE_MAX_LINE_BYTES = SSE_MAX_PAYLOAD_BYTES + 64

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_MAX_RETRIES",
    "INITIAL_RETRY_DELAY",
    "MAX_RETRY_DELAY",
    "MAX_RETRY_AFTER_SECONDS",
    "DEFAULT_TIMEOUT",
    "DEFAULT_CONNECT_TIMEOUT",
    "MAX_CONNECTIONS",
    "MAX_KEEPALIVE_CONNECTIONS",
    "KEEPALIVE_EXPIRY",
    "SSE_MAX_PAYLOAD_BYTES",
    "SSE_MAX_LINE_BYTES",
]
