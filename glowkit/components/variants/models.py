"""
Variants component - Schema and result models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from glowkit.domain.entities import AxisValue, TokenInput


def _frozen(mapping: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class CompoundRule:
    """Tokens applied when every axis/value pair in ``when`` matches."""

    when: Mapping[str, str] = field(default_factory=_frozen)
    tokens: tuple[str, ...] = ()

    def matches(self, resolved: Mapping[str, str]) -> bool:
        return all(resolved.get(axis) == value for axis, value in self.when.items())


@dataclass(frozen=True)
class VariantSchema:
    """
    Declarative style schema for one element type.

    ``variants`` preserves declaration order, which is the order axis rules
    are applied in. Values are normalized keys (booleans become "true" or
    "false"). Build instances with ``define_variants`` so the schema is
    validated once at definition time.
    """

    name: str = "variants"
    base: tuple[str, ...] = ()
    variants: Mapping[str, Mapping[str, tuple[str, ...]]] = field(default_factory=_frozen)
    compound: tuple[CompoundRule, ...] = ()
    defaults: Mapping[str, str] = field(default_factory=_frozen)

    @property
    def axes(self) -> tuple[str, ...]:
        return tuple(self.variants)

    def domain(self, axis: str) -> tuple[str, ...]:
        """Return the declared values for an axis (empty if undeclared)."""
        return tuple(self.variants.get(axis, ()))

    def __call__(
        self, *, class_name: TokenInput = None, **axis_values: AxisValue | None
    ) -> str:
        """Resolve and return the joined class string."""
        from .component import resolve

        return resolve(self, axis_values, class_name).class_name


@dataclass(frozen=True)
class ResolvedStyle:
    """Ordered token list produced by a single resolution call."""

    tokens: tuple[str, ...]
    axes: Mapping[str, str] = field(default_factory=_frozen)

    @property
    def class_name(self) -> str:
        return " ".join(self.tokens)

    def __str__(self) -> str:
        return self.class_name
