"""Structured logging utilities for the client library.

Rationale:
- The library never configures logging on import. Every client logs through
  the logger injected via ``ClientConfig.logger`` (default: the ``groqwire``
  logger, which carries a ``NullHandler``).
- Applications that want the library's JSON output opt in with
  ``get_logger`` / ``configure_logger``.
- ``log_event`` emits one JSON object per line; ``normalized_log_event``
  guarantees a canonical key set (``structured``, ``phase``, ``attempt``,
  ``error_code``, ``emitted``, ``tokens``) so request, retry and stream events
  can be filtered uniformly.

Events emitted by the library
-----------------------------
``request.start`` / ``request.end`` (DEBUG), ``request.retry`` (INFO),
``request.error`` (WARNING, DEBUG for cancellation),
``response.error_body_unparseable`` (DEBUG), ``stream.end`` (DEBUG),
``stream.decode_error`` (WARNING).
"""
from __future__ import annotations

import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Mapping, Optional

from .log_support import JsonFormatter, LogContext

LIBRARY_LOGGER_NAME = "groqwire"

_CONSOLE_HANDLER_ATTR = "_groqwire_console_handler"
_FILE_HANDLER_ATTR = "_groqwire_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
_LOG_FILE_BACKUPS = 5


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _resolve_level(level: int | str, fallback: int) -> int:
    """Numeric level for ``level``; unknown names resolve to ``fallback``."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else fallback


def _managed(logger: logging.Logger, marker: str) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, marker, False)]


def get_logger(
    name: str = LIBRARY_LOGGER_NAME,
    json_mode: bool = True,
    level: int = logging.INFO,
) -> logging.Logger:
    """Attach a managed stderr handler to the library logger and return ``name``.

    Idempotent: repeated calls update the level and formatter of the managed
    handler instead of adding duplicates. Child loggers (``groqwire.x``)
    propagate to the library logger.
    """
    base = logging.getLogger(LIBRARY_LOGGER_NAME)
    base.setLevel(level)
    handlers = _managed(base, _CONSOLE_HANDLER_ATTR)
    if not handlers:
        console = logging.StreamHandler(sys.stderr)
        setattr(console, _CONSOLE_HANDLER_ATTR, True)
        base.addHandler(console)
        handlers = [console]
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(_formatter(json_mode))
    if name == LIBRARY_LOGGER_NAME:
        return base
    child = logging.getLogger(name)
    child.setLevel(logging.NOTSET)
    child.propagate = True
    return child


def _attach_file_handler(logger: logging.Logger, path: str, json_mode: bool) -> None:
    target = os.path.abspath(os.path.expanduser(path))
    keep: Optional[logging.Handler] = None
    for handler in _managed(logger, _FILE_HANDLER_ATTR):
        if keep is None and getattr(handler, "baseFilename", None) == target:
            keep = handler
            continue
        logger.removeHandler(handler)
        handler.close()
    if keep is None:
        os.makedirs(os.path.dirname(target), exist_ok=True)
        keep = RotatingFileHandler(
            target, maxBytes=_LOG_FILE_MAX_BYTES, backupCount=_LOG_FILE_BACKUPS, encoding="utf-8"
        )
        setattr(keep, _FILE_HANDLER_ATTR, True)
        logger.addHandler(keep)
    keep.setLevel(logger.level)
    keep.setFormatter(_formatter(json_mode))


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
    logger_name: str = LIBRARY_LOGGER_NAME,
) -> logging.Logger:
    """Reconfigure the library logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Numeric level or level name (``"DEBUG"``). ``None`` keeps the current
        level. Handlers on the logger follow the new level.
    file_path: Optional[str]
        Attach (or reuse) a rotating JSON log file at this path. ``None``
        detaches any file handler this function attached earlier.
    json_mode: bool
        JSON formatter (default) or plain text for the file handler.
    logger_name: str
        Logger to configure; the ``groqwire`` logger by default.

    Returns
    -------
    logging.Logger
        The configured logger.

    Handlers not created by this module are left alone apart from their level.
    """
    logger = logging.getLogger(logger_name)
    if level is not None:
        logger.setLevel(_resolve_level(level, logger.level))
        for handler in logger.handlers:
            handler.setLevel(logger.level)

    if file_path is not None:
        _attach_file_handler(logger, file_path, json_mode)
        return logger
    for handler in _managed(logger, _FILE_HANDLER_ATTR):
        logger.removeHandler(handler)
        handler.close()
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit ``event`` as a single JSON line.

    The payload is ``{"event": event}`` plus the context fields and ``fields``.
    ``None`` values are dropped unless ``keep_none``. Nothing is serialized
    when ``logger`` is not enabled for ``level``.
    """
    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    payload |= fields if keep_none else {k: v for k, v in fields.items() if v is not None}
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


# ---------------------- Normalization Layer ---------------------------------
REQUIRED_NORMALIZED_KEYS = (
    "structured",
    "phase",
    "attempt",
    "error_code",
    "emitted",
    "tokens",
)


def _usage_dict(tokens: Any) -> Optional[Dict[str, Any]]:
    """Token usage as a plain dict (mapping or ``CompletionUsage``-like model)."""
    if tokens is None:
        return None
    if isinstance(tokens, Mapping):
        return dict(tokens)
    dump = getattr(tokens, "model_dump", None)
    if callable(dump):
        return dump(exclude_none=True)
    return {"value": repr(tokens)}


def normalized_log_event(  # noqa: PLR0913
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    attempt: int | None = None,
    error_code: str | None = None,
    emitted: bool | None = None,
    tokens: Any = None,
    structured: bool = True,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit a structured event that always carries the normalized key set.

    ``error_code`` is omitted when ``None`` (no error); the other normalized
    keys are present even when unknown. ``extra_fields`` with ``None`` values
    are dropped and never replace a normalized value that is set.
    """
    payload: Dict[str, Any] = {
        "structured": structured,
        "phase": phase,
        "attempt": attempt,
        "emitted": emitted,
        "tokens": _usage_dict(tokens),
    }
    if error_code is not None:
        payload["error_code"] = error_code
    for key, value in extra_fields.items():
        if value is None or payload.get(key) is not None:
            continue
        payload[key] = value
    log_event(logger, event, ctx, level=level, keep_none=True, **payload)


__all__ = [
    "LIBRARY_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
