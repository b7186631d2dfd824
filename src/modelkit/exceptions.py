"""Domain exception hierarchy for the observable state layer."""

from __future__ import annotations


class ModelKitError(RuntimeError):
    """Base class for all domain-level modelkit errors."""


class InvalidArgumentError(ModelKitError, TypeError):
    """Raised when an operation receives an argument of an unusable type."""


class ConfigValidationError(ModelKitError):
    """Raised when configuration cannot be validated safely."""
