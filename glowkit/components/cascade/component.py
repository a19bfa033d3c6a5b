"""
Cascade component - Tree-scoped configuration values.

Scopes are threaded explicitly by reference down the construction call
tree; there is no module-level current scope.

Invariants:
- I1: Establishing a nested scope never mutates its ancestors.
- I2: Reading outside any scope is valid and yields the global default.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from glowkit.domain.entities import AxisValue

from .models import CascadeScope, ScopeHandle

logger = logging.getLogger(__name__)


class CascadeStore:
    """Creates and reads cascade scopes on top of a global default mapping."""

    def __init__(self, defaults: Mapping[str, AxisValue] | None = None) -> None:
        self._defaults: Mapping[str, AxisValue] = MappingProxyType(dict(defaults or {}))

    @property
    def defaults(self) -> Mapping[str, AxisValue]:
        return self._defaults

    def establish_scope(
        self,
        partial_values: Mapping[str, AxisValue | None] | None = None,
        parent: CascadeScope | ScopeHandle | None = None,
        *,
        owner: str | None = None,
    ) -> ScopeHandle:
        """
        Create a child scope.

        Axes absent from ``partial_values`` (or set to None) are inherited
        from ``parent``, or from the global defaults when there is no parent.

        Raises:
            RuntimeError: If ``parent`` is a handle that was already released.
        """
        if isinstance(parent, ScopeHandle):
            if parent.released:
                raise RuntimeError("Cannot establish a scope under a released scope")
            parent = parent.scope

        inherited = parent.values if parent is not None else self._defaults
        values = dict(inherited)
        values.update({k: v for k, v in (partial_values or {}).items() if v is not None})

        scope = CascadeScope(values=MappingProxyType(values), parent=parent, owner=owner)
        logger.debug("Established scope %s at depth %d: %s", owner, scope.depth, values)
        return ScopeHandle(scope=scope)

    def read_value(self, axis: str, scope: CascadeScope | None = None) -> AxisValue | None:
        """
        Return the nearest value for ``axis``.

        Never raises. Returns the global default (possibly None) when no
        scope exists or the scope does not carry the axis.
        """
        if scope is not None:
            value = scope.get(axis)
            if value is not None:
                return value
        else:
            logger.debug("No cascade scope for axis '%s', using global default", axis)
        return self._defaults.get(axis)
