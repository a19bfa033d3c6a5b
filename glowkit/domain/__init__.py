"""Domain types and the configuration error taxonomy."""

from .entities import AxisValue, LifecycleState, Node, TokenInput
from .errors import (
    ConfigurationError,
    InvalidVariantValue,
    KitRulesError,
    MissingAxisResolution,
)

__all__ = [
    "AxisValue",
    "ConfigurationError",
    "InvalidVariantValue",
    "KitRulesError",
    "LifecycleState",
    "MissingAxisResolution",
    "Node",
    "TokenInput",
]
