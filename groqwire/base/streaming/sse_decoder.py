"""Server-Sent Events decoder.

Turns an iterable of raw byte chunks (arbitrary boundaries) into a lazy
sequence of :class:`ServerSentEvent` objects.

Framing
-------
- Lines end in ``\\n``, ``\\r\\n`` or ``\\r``; a ``\\r\\n`` split across two
  chunks counts as one terminator.
- A line is split at its first ``:``; at most one leading space is trimmed
  from the value. A colon at position 0 marks a comment. Lines without a
  colon are ignored.
- ``event`` sets the type, ``data`` appends a line (joined with ``\\n``),
  ``id`` sets the id unless the value contains NUL, ``retry`` is parsed
  (digits only) and carried on the event.
- A blank line emits the pending event when any of event, data or id was
  set, then resets the accumulators. A pending event without its blank line
  at end of input is discarded.
- A line longer than ``max_line_bytes`` raises :class:`SSEDecodeError`.

Each ``decode`` call owns fresh state, so one decoder can serve several
streams sequentially. Exceptions raised by the chunk source propagate once
and end the generator.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from ...config.defaults import SSE_MAX_LINE_BYTES
from ..errors import SSEDecodeError

_EOL = re.compile(rb"[\r\n]")
_CR = 0x0D
_LF = 0x0A


@dataclass(frozen=True)
class ServerSentEvent:
    """One dispatched event."""

    event: str = ""
    data: str = ""
    id: str = ""
    retry: Optional[int] = None


class SSEDecoder:
    """Incremental ``text/event-stream`` decoder."""

    def __init__(self, *, max_line_bytes: int = SSE_MAX_LINE_BYTES) -> None:
        if max_line_bytes <= 0:
            raise ValueError("max_line_bytes must be positive")
        self.max_line_bytes = max_line_bytes

    def _check(self, size: int) -> None:
        if size > self.max_line_bytes:
            raise SSEDecodeError(
                f"event-stream line exceeds {self.max_line_bytes} bytes"
            )

    def iter_lines(self, chunks: Iterable[bytes]) -> Iterator[bytes]:
        """Split a chunked byte stream into lines (terminators removed)."""
        buf = bytearray()
        # buf[:scanned] is known to hold no terminator still to be handled.
        scanned = 0
        for chunk in chunks:
            if not chunk:
                continue
            buf += chunk
            pos = 0
            while True:
                match = _EOL.search(buf, scanned)
                if match is None:
                    scanned = len(buf)
                    break
                idx = match.start()
                if buf[idx] == _CR:
                    if idx + 1 == len(buf):
                        # Wait for the next chunk to tell "\r" from "\r\n".
                        scanned = idx
                        break
                    end = idx + 2 if buf[idx + 1] == _LF else idx + 1
                else:
                    end = idx + 1
                self._check(idx - pos)
                yield bytes(buf[pos:idx])
                pos = scanned = end
            del buf[:pos]
            scanned -= pos
            self._check(len(buf) - buf.endswith(b"\r"))
        if buf.endswith(b"\r"):
            del buf[-1:]
        if buf:
            yield bytes(buf)

    def decode(self, chunks: Iterable[bytes]) -> Iterator[ServerSentEvent]:
        """Yield events parsed from ``chunks`` (lazy)."""
        event = ""
        data: Optional[List[str]] = None
        last_id = ""
        retry: Optional[int] = None

        for raw in self.iter_lines(chunks):
            line = raw.decode("utf-8", errors="replace")
            if not line:
                if event or data is not None or last_id:
                    yield ServerSentEvent(
                        event=event,
                        data="\n".join(data or ()),
                        id=last_id,
                        retry=retry,
                    )
                event, data, last_id, retry = "", None, "", None
                continue

            field, sep, value = line.partition(":")
            if not sep or not field:
                continue
            if value.startswith(" "):
                value = value[1:]

            if field == "event":
                event = value
            elif field == "data":
                if data is None:
                    data = []
                data.append(value)
            elif field == "id":
                if "\0" not in value:
                    last_id = value
            elif field == "retry":
                if value.isascii() and value.isdigit():
                    retry = int(value)


__all__ = ["ServerSentEvent", "SSEDecoder"]
