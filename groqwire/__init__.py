"""groqwire package

Typed client for the Groq OpenAI-compatible HTTP API.

Purpose:
    Provide a small, stable surface for calling chat completions (plain and
    streamed), embeddings, audio, batches, files and models, with retries,
    cancellation and a typed error taxonomy handled by one transport core.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`Groq`, :class:`ClientConfig`
    - Call controls: :class:`RequestOptions`, :class:`CancellationToken`
    - Values: :class:`Opt` (tri-state optional), :class:`FileUpload`
    - Streaming: :class:`Stream`
    - Exceptions: :class:`GroqError` and its subclasses, :class:`ErrorCode`

Notes:
    - The library logs to the ``groqwire`` logger, which carries a
      ``NullHandler`` until the application configures logging (see
      ``groqwire.base.logging.configure_logger``).
"""

import logging

from .base.cancellation import CancellationToken, CancelledError
from .base.constants import VERSION
from .base.encoding.form import FileUpload
from .base.errors import (
    APIStatusError,
    APIStreamError,
    AuthenticationError,
    BadRequestError,
    ConflictError,
    DecodeError,
    ErrorCode,
    GroqError,
    InternalServerError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    RequestTimeoutError,
    ResponseValidationError,
    SSEDecodeError,
    TransportError,
    UnprocessableEntityError,
)
from .base.options import Opt, OptState, RequestOptions
from .base.streaming import Stream, StreamState
from .client import Groq
from .config import ClientConfig

__version__ = VERSION

logging.getLogger("groqwire").addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Groq",
    "ClientConfig",
    "RequestOptions",
    "CancellationToken",
    "CancelledError",
    "Opt",
    "OptState",
    "FileUpload",
    "Stream",
    "StreamState",
    "ErrorCode",
    "GroqError",
    "TransportError",
    "RequestTimeoutError",
    "ResponseValidationError",
    "DecodeError",
    "SSEDecodeError",
    "APIStatusError",
    "BadRequestError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "ConflictError",
    "UnprocessableEntityError",
    "RateLimitError",
    "InternalServerError",
    "APIStreamError",
]
