"""Resilience helpers (retry with backoff)."""

from .retry import RetryConfig, calculate_backoff, default_should_retry, do_with_retry

__all__ = ["RetryConfig", "calculate_backoff", "default_should_retry", "do_with_retry"]
