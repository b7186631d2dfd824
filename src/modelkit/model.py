"""Observable key/value entity with change notification."""

from __future__ import annotations

from collections.abc import Callable, Mapping
import logging
from typing import Any
import uuid as uuid_lib

from .events.emitter import Emitter, Listener

LOGGER = logging.getLogger(__name__)


def new_uuid() -> str:
    """Return a fresh process-unique identifier string."""
    return str(uuid_lib.uuid4())


class Model:
    """Key/value entity that announces every attribute write.

    Attributes live in a private mapping, so names such as ``get``, ``set`` or
    ``on`` are ordinary attribute keys and never shadow methods. Each instance
    owns its emitter; listeners of one model never see another model's events.

    ``set(name, value)`` fires ``change:<name>`` and then ``change``, with no
    arguments, on every call, including when the value is unchanged.
    """

    uuid_factory: Callable[[], str] = staticmethod(new_uuid)

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._uuid = self.uuid_factory()
        self._emitter = Emitter()
        self._attributes: dict[str, Any] = {}
        if initial is not None:
            # Seeding is silent: no listener can exist yet.
            for key in initial:
                self._attributes[key] = initial[key]
        LOGGER.debug(
            "model.created",
            extra={
                "event": "model.created",
                "uuid": self._uuid,
                "attribute_count": len(self._attributes),
            },
        )

    @property
    def uuid(self) -> str:
        """Identifier assigned at construction."""
        return self._uuid

    @property
    def id(self) -> str:
        """Read-only alias of ``uuid``."""
        return self._uuid

    def get(self, name: str) -> Any:
        """Return the stored value for ``name`` or ``None`` when never set."""
        return self._attributes.get(name)

    def has(self, name: str) -> bool:
        """Return True when ``name`` has been stored, even as ``None``."""
        return name in self._attributes

    def set(self, name: str, value: Any) -> None:
        """Store ``value`` then fire ``change:<name>`` followed by ``change``."""
        self._attributes[name] = value
        LOGGER.debug(
            "model.set",
            extra={"event": "model.set", "uuid": self._uuid, "attribute": name},
        )
        # Exact dispatch: attribute names may contain whitespace.
        self._emitter.dispatch(f"change:{name}")
        self._emitter.dispatch("change")

    def on(self, names: str, callback: Listener) -> None:
        """Listen for change events or custom events on this model."""
        self._emitter.on(names, callback)

    def off(self, names: str, callback: Listener) -> None:
        """Remove every registration of ``callback`` under ``names``."""
        self._emitter.off(names, callback)

    def trigger(self, names: str, *args: Any) -> None:
        """Fire custom events scoped to this model."""
        self._emitter.trigger(names, *args)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(uuid={self._uuid!r})"
