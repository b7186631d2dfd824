"""Event subscription and dispatch components."""

from .bus import EventBus, event_bus
from .emitter import Emitter, parse_event_names, set_dispatch_logging

__all__ = [
    "Emitter",
    "EventBus",
    "event_bus",
    "parse_event_names",
    "set_dispatch_logging",
]
