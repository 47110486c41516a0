"""Transport core: request building, retries and response classification."""

from .client import BaseClient
from .request_builder import build_headers, build_url, join_url, platform_headers
from .response_handling import check_content_type, decode_response, raise_for_status

__all__ = [
    "BaseClient",
    "build_headers",
    "build_url",
    "join_url",
    "platform_headers",
    "check_content_type",
    "decode_response",
    "raise_for_status",
]
