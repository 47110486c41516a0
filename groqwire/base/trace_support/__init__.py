"""Auxiliary tracing helpers used by base.tracing when OpenTelemetry is absent."""

from .tracing_noop_span import _NoOpSpan

__all__ = ["_NoOpSpan"]
