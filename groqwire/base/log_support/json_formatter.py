"""JSON logging formatter for the library logger.

Defines :class:`JsonFormatter`, which serializes standard logging fields and
hoists the keys of JSON-encoded messages (as produced by ``log_event``) to
the top level of the output object.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

# Attributes every LogRecord has; anything else on a record came from ``extra=``.
_STANDARD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}


def _structured_message(text: str) -> Dict[str, Any] | None:
    if not text.startswith("{"):
        return None
    try:
        parsed = json.loads(text)
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object.

    Keys: ``ts``, ``level``, ``logger``, then either ``msg`` or the hoisted
    keys of a JSON object message, then ``extra=`` attributes and ``exc``.
    """

    def format(self, record: logging.LogRecord) -> str:
        out: Dict[str, Any] = {
            "ts": datetime.now(timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
        }
        text = record.getMessage()
        out.update(_structured_message(text) or {"msg": text})
        for key, value in vars(record).items():
            if key.startswith("_") or key in _STANDARD_ATTRS:
                continue
            out.setdefault(key, value)
        if record.exc_info:
            out["exc"] = self.formatException(record.exc_info)
        return json.dumps(out, ensure_ascii=False, default=str)


__all__ = ["JsonFormatter", "ISO"]
