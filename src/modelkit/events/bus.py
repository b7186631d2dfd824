"""Event bus for decoupled component communication.

Usage:
    bus = EventBus()

    def on_selected(item_id: str) -> None:
        print(f"Selected: {item_id}")

    bus.on("item:selected", on_selected)
    bus.trigger("item:selected", "42")
"""

from __future__ import annotations

from .emitter import Emitter


class EventBus(Emitter):
    """Bare emitter used as a shared signaling channel.

    Carries no attributes and no identifier; senders and receivers only need
    a reference to the same bus instance.
    """


# Global event bus instance
event_bus = EventBus()
