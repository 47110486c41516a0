"""Request-side value wrappers (tri-state optional, per-request options)."""

from .optional import Opt, OptState, unwrap, is_unset
from .request_options import RequestOptions, DEFAULT_REQUEST_OPTIONS

__all__ = ["Opt", "OptState", "unwrap", "is_unset", "RequestOptions", "DEFAULT_REQUEST_OPTIONS"]
