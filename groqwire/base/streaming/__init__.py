"""Streaming primitives: SSE decoding and the typed ``Stream`` wrapper."""

from .sse_decoder import SSEDecoder, ServerSentEvent
from .stream import Stream, StreamState

__all__ = ["SSEDecoder", "ServerSentEvent", "Stream", "StreamState"]
