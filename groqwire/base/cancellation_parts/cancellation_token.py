"""Cooperative cancellation token used by transport, retry and streams.

A token can be polled (``cancelled`` / ``raise_if_cancelled``), waited on
(``wait``, used for interruptible retry backoff) or observed through
``register`` callbacks. Callbacks are how a socket read blocked inside a
stream is woken up: the registered callback closes the response.
"""

from __future__ import annotations

import threading
from typing import Callable

from .state import State
from .cancelled_error import CancelledError


class CancellationToken:
    """Thread-safe, one-shot cancellation flag with cascading children.

    ``cancel`` may be called from any thread. Callbacks and child tokens are
    notified once, outside the internal lock, in registration order.
    """

    def __init__(self, *, parent: "CancellationToken | None" = None) -> None:
        self._state = State()
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested."""
        return self._state.cancelled

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason given to ``cancel``, if any."""
        return self._state.reason

    def cancel(self, reason: str | None = None) -> None:
        """Cancel the token; later calls are no-ops and keep the first reason."""
        notify = self._state.trip(reason)
        if notify is None:
            return
        callbacks, children = notify
        for callback in callbacks:
            callback()
        for child in children:
            child.cancel(reason)

    def cancel_after(self, seconds: float, reason: str | None = None) -> threading.Timer:
        """Cancel from a daemon timer after ``seconds``; returns the timer."""
        timer = threading.Timer(seconds, self.cancel, kwargs={"reason": reason or "deadline exceeded"})
        timer.daemon = True
        timer.start()
        return timer

    def register(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Call ``callback`` on cancellation and return a function that unregisters it.

        On an already-cancelled token the callback runs right away.
        """
        key = self._state.add_callback(callback)
        if key is None:
            callback()
            return lambda: None
        return lambda: self._state.drop_callback(key)

    def wait(self, timeout: float | None = None) -> bool:
        """Block up to ``timeout`` seconds; True once the token is cancelled."""
        return self._state.event.wait(timeout)

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Cascade this token's cancellation to ``token`` and return it."""
        state = self._state
        with state.lock:
            state.children.append(token)
            already, reason = state.cancelled, state.reason
        if already:
            token.cancel(reason)
        return token

    def raise_if_cancelled(self) -> None:
        if self._state.cancelled:
            raise CancelledError(self._state.reason or "operation cancelled")

    def child(self) -> "CancellationToken":
        return CancellationToken(parent=self)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        state = self._state
        return f"CancellationToken(cancelled={state.cancelled}, reason={state.reason!r}, children={len(state.children)})"


__all__ = ["CancellationToken"]
