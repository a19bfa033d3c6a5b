"""
Configuration error taxonomy.

Both concrete errors are synchronous and non-retryable: they point at a
caller or schema authoring mistake, never a transient condition.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class ConfigurationError(ValueError):
    """Raised when element configuration is invalid or unresolvable."""

    def __init__(self, message: str, schema: str | None = None) -> None:
        self.schema = schema
        if schema:
            message = f"{schema}: {message}"
        super().__init__(message)


class InvalidVariantValue(ConfigurationError):
    """A supplied axis value is outside the schema's declared domain."""

    def __init__(
        self,
        axis: str,
        value: Any,
        allowed: Iterable[str] = (),
        schema: str | None = None,
    ) -> None:
        self.axis = axis
        self.value = value
        self.allowed = tuple(allowed)
        if self.allowed:
            message = (
                f"Invalid value {value!r} for axis '{axis}'. "
                f"Expected one of: {', '.join(self.allowed)}"
            )
        else:
            message = f"Unknown axis '{axis}' (value {value!r})"
        super().__init__(message, schema=schema)


class MissingAxisResolution(ConfigurationError):
    """An axis has no explicit value, no inherited value and no default."""

    def __init__(self, axis: str, schema: str | None = None) -> None:
        self.axis = axis
        super().__init__(
            f"Axis '{axis}' has no explicit value, no inherited value and no default",
            schema=schema,
        )


class KitRulesError(ConfigurationError):
    """Raised when the kit rules file fails to parse or validate."""
