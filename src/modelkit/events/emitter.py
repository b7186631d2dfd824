"""Listener registry and synchronous dispatch shared by models and buses.

Usage:
    emitter = Emitter()

    def on_change() -> None:
        print("changed")

    emitter.on("change change:name", on_change)
    emitter.trigger("change")
    emitter.off("change", on_change)

Dispatch is in-line and depth-first. Each event's listener list is copied
before it is walked, so callbacks may call ``on``/``off``/``trigger`` on the
same emitter without disturbing the delivery already in progress.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any

LOGGER = logging.getLogger(__name__)

Listener = Callable[..., Any]

_dispatch_logging = False


def set_dispatch_logging(enabled: bool) -> None:
    """Toggle per-dispatch DEBUG records for every emitter in the process."""
    global _dispatch_logging
    _dispatch_logging = bool(enabled)


def parse_event_names(names: str) -> tuple[str, ...]:
    """Split a single event name or a whitespace-separated list of names.

    Listing order and repeated names are preserved; empty fragments are dropped.
    """
    return tuple(names.split())


class Emitter:
    """Ordered listener registry with synchronous, snapshot-based dispatch."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def on(self, names: str, callback: Listener) -> None:
        """Register ``callback`` under every listed event name.

        Args:
            names: Event name, or several names separated by whitespace
            callback: Called with the positional arguments given to ``trigger``

        Registering the same callback twice stores two entries, so it runs
        twice per trigger.
        """
        for name in parse_event_names(names):
            self._listeners.setdefault(name, []).append(callback)
            LOGGER.debug(
                "event.subscribed",
                extra={"event": "event.subscribed", "event_name": name},
            )

    def off(self, names: str, callback: Listener) -> None:
        """Remove every registration of ``callback`` under the listed names.

        Matching is by identity. Unknown names or callbacks are ignored.
        """
        for name in parse_event_names(names):
            registered = self._listeners.get(name)
            if not registered:
                continue
            remaining = [item for item in registered if item is not callback]
            if len(remaining) == len(registered):
                continue
            # Rebind rather than mutate so in-flight snapshots stay untouched.
            self._listeners[name] = remaining
            LOGGER.debug(
                "event.unsubscribed",
                extra={
                    "event": "event.unsubscribed",
                    "event_name": name,
                    "removed": len(registered) - len(remaining),
                },
            )

    def trigger(self, names: str, *args: Any) -> None:
        """Invoke listeners of each listed event, in listing order, with ``args``.

        An exception raised by a listener aborts the rest of the dispatch and
        propagates to the caller.
        """
        for name in parse_event_names(names):
            self.dispatch(name, *args)

    def dispatch(self, name: str, *args: Any) -> None:
        """Invoke listeners of exactly one event name, without name parsing."""
        snapshot = tuple(self._listeners.get(name, ()))
        if _dispatch_logging:
            LOGGER.debug(
                "event.dispatch",
                extra={
                    "event": "event.dispatch",
                    "event_name": name,
                    "listeners": len(snapshot),
                },
            )
        for callback in snapshot:
            callback(*args)

    def listeners(self, name: str) -> tuple[Listener, ...]:
        """Return the callbacks currently registered for one event name."""
        return tuple(self._listeners.get(name, ()))
