"""Tests for the shared signaling channel."""

from __future__ import annotations

import unittest
from unittest.mock import Mock

from modelkit.events import Emitter, EventBus, event_bus
from modelkit.model import Model


class EventBusTests(unittest.TestCase):
    """Validate the EventBus contract for on/off/trigger."""

    def setUp(self) -> None:
        self.bus = EventBus()

    def test_bus_is_an_emitter_without_state(self) -> None:
        self.assertIsInstance(self.bus, EventBus)
        self.assertIsInstance(self.bus, Emitter)
        self.assertFalse(hasattr(self.bus, "uuid"))
        self.assertFalse(hasattr(self.bus, "get"))

    def test_add_trigger_remove_roundtrip(self) -> None:
        callback = Mock()
        self.bus.on("a", callback)
        callback.assert_not_called()

        self.bus.trigger("a", 1, 2, 3)
        callback.assert_called_once_with(1, 2, 3)

        self.bus.off("a", callback)
        self.bus.trigger("a")
        self.assertEqual(callback.call_count, 1)

    def test_multiple_events_on_trigger(self) -> None:
        callback = Mock()
        self.bus.on("a b", callback)
        self.bus.trigger("a b")
        self.assertEqual(callback.call_count, 2)

    def test_off_removes_every_instance_of_handler(self) -> None:
        callback = Mock()
        self.bus.on("a", callback)
        self.bus.on("a", callback)
        self.bus.off("a", callback)
        self.bus.trigger("a")
        callback.assert_not_called()

    def test_instances_are_isolated(self) -> None:
        callback = Mock()
        other = EventBus()
        self.bus.on("a", callback)
        other.trigger("a")
        callback.assert_not_called()


class SharedBusTests(unittest.TestCase):
    """Validate the bus as a channel between unrelated components."""

    def test_models_signal_each_other_through_shared_bus(self) -> None:
        selection = Model({"selected": None})
        bus = EventBus()
        bus.on("item:selected", lambda item_id: selection.set("selected", item_id))

        on_change = Mock()
        selection.on("change:selected", on_change)

        item = Model({"title": "first"})
        bus.trigger("item:selected", item.uuid)

        self.assertEqual(selection.get("selected"), item.uuid)
        on_change.assert_called_once_with()

    def test_module_level_bus_is_an_event_bus(self) -> None:
        callback = Mock()
        event_bus.on("test:global", callback)
        try:
            event_bus.trigger("test:global", "payload")
        finally:
            event_bus.off("test:global", callback)
        callback.assert_called_once_with("payload")
        self.assertEqual(event_bus.listeners("test:global"), ())


if __name__ == "__main__":
    unittest.main()
