"""
Cascade component - Scope models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from glowkit.domain.entities import AxisValue


@dataclass(frozen=True)
class CascadeScope:
    """
    Immutable snapshot of axis values inherited by a subtree.

    ``values`` already contains every inherited axis, so a lookup never has
    to walk ``parent``. The parent link is kept for introspection.
    """

    values: Mapping[str, AxisValue] = field(default_factory=lambda: MappingProxyType({}))
    parent: CascadeScope | None = None
    owner: str | None = None

    @property
    def depth(self) -> int:
        return 0 if self.parent is None else self.parent.depth + 1

    def get(self, axis: str) -> AxisValue | None:
        return self.values.get(axis)


@dataclass
class ScopeHandle:
    """
    Ownership record for an established scope.

    Held by the element that established the scope. Use as a context
    manager: entering yields the scope, exiting releases it.
    """

    scope: CascadeScope
    released: bool = False

    def release(self) -> None:
        self.released = True

    def __enter__(self) -> CascadeScope:
        return self.scope

    def __exit__(self, *exc_info: Any) -> None:
        self.release()
