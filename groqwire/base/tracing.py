"""Lightweight tracing facade with no-op fallback.

The transport wraps every HTTP call in a span (``groqwire.request``) without
taking a hard dependency on OpenTelemetry. When ``opentelemetry-api`` is
installed (``groqwire[tracing]``) a real tracer is used; otherwise spans are
no-op objects exposing the same ``set_attribute`` / ``record_exception``
surface.
"""
from __future__ import annotations

from .trace_support import _NoOpSpan

try:
    from opentelemetry import trace as _otel_trace
except ImportError:  # optional extra not installed
    _otel_trace = None


def start_span(name: str, *, service_name: str = "groqwire"):
    """Start and return a span context manager.

    Usage:

        with start_span("groqwire.request") as span:
            span.set_attribute("http.method", "POST")
    """
    if _otel_trace is not None:
        return _otel_trace.get_tracer(service_name).start_as_current_span(name)
    return _NoOpSpan(name)


__all__ = ["start_span"]
