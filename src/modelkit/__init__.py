"""Top-level package for modelkit, an observable state layer for UI components."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .collection import Collection
    from .config import apply_config, ensure_config_dir, load_config
    from .events import Emitter, EventBus, event_bus
    from .exceptions import ConfigValidationError, InvalidArgumentError, ModelKitError
    from .model import Model

__all__ = [
    "Collection",
    "ConfigValidationError",
    "Emitter",
    "EventBus",
    "InvalidArgumentError",
    "Model",
    "ModelKitError",
    "apply_config",
    "ensure_config_dir",
    "event_bus",
    "load_config",
]


def __getattr__(name: str) -> Any:
    """Lazily import symbols so config/logging dependencies load on first use."""
    if name == "Model":
        from .model import Model

        return Model
    if name == "Collection":
        from .collection import Collection

        return Collection
    if name in {"Emitter", "EventBus", "event_bus"}:
        from .events import Emitter, EventBus, event_bus

        return {"Emitter": Emitter, "EventBus": EventBus, "event_bus": event_bus}[name]
    if name in {"ConfigValidationError", "InvalidArgumentError", "ModelKitError"}:
        from .exceptions import (
            ConfigValidationError,
            InvalidArgumentError,
            ModelKitError,
        )

        return {
            "ConfigValidationError": ConfigValidationError,
            "InvalidArgumentError": InvalidArgumentError,
            "ModelKitError": ModelKitError,
        }[name]
    if name in {"apply_config", "ensure_config_dir", "load_config"}:
        from .config import apply_config, ensure_config_dir, load_config

        return {
            "apply_config": apply_config,
            "ensure_config_dir": ensure_config_dir,
            "load_config": load_config,
        }[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
