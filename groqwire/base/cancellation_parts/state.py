"""Mutable bookkeeping behind a ``CancellationToken``.

All mutation happens under ``lock``. ``trip`` flips the token to cancelled
exactly once and hands back the callbacks and children the caller must notify
outside the lock.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from threading import Event, Lock
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple


@dataclass
class State:
    cancelled: bool = False
    reason: Optional[str] = None
    lock: Lock = field(default_factory=Lock, repr=False)
    event: Event = field(default_factory=Event, repr=False)
    children: List[Any] = field(default_factory=list, repr=False)
    callbacks: Dict[int, Callable[[], None]] = field(default_factory=dict, repr=False)
    _ids: Iterator[int] = field(default_factory=count, repr=False)

    def trip(self, reason: Optional[str]) -> Optional[Tuple[List[Callable[[], None]], List[Any]]]:
        """Mark cancelled; ``None`` when it already was."""
        with self.lock:
            if self.cancelled:
                return None
            self.cancelled = True
            self.reason = reason
            self.event.set()
            pending = list(self.callbacks.values())
            self.callbacks.clear()
            return pending, list(self.children)

    def add_callback(self, callback: Callable[[], None]) -> Optional[int]:
        """Store ``callback`` and return its key, or ``None`` if already cancelled."""
        with self.lock:
            if self.cancelled:
                return None
            key = next(self._ids)
            self.callbacks[key] = callback
            return key

    def drop_callback(self, key: int) -> None:
        with self.lock:
            self.callbacks.pop(key, None)


__all__ = ["State"]
