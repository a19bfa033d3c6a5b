"""
Adapter component - Element specs, per-render instances and output handles.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Union

from glowkit.components.cascade import CascadeScope, CascadeStore
from glowkit.components.variants import VariantSchema
from glowkit.domain.entities import AxisValue, Node
from glowkit.ports import GlyphPort, PrimitivePort, TextPort
from glowkit.rules.models import KitRules

if TYPE_CHECKING:
    from .component import RenderPass


class Ref:
    """
    Single-slot output handle for an element's root node.

    Written once by the element after construction; cleared on unmount.
    """

    def __init__(self) -> None:
        self._current: Node | None = None

    @property
    def current(self) -> Node | None:
        return self._current

    def attach(self, node: Node) -> None:
        if self._current is not None and self._current is not node:
            raise RuntimeError("Ref is already bound to another node")
        self._current = node

    def detach(self) -> None:
        self._current = None

    def __repr__(self) -> str:
        return f"Ref(current={self._current!r})"


RefTarget = Union[Ref, Callable[[Node | None], Any]]


@dataclass(frozen=True)
class ElementSpec:
    """
    Static description of one element type.

    Attributes:
        name: Element name, used in errors and logs.
        schema: Variant schema resolved on every render.
        tag: Default root tag.
        inherits: Axes read from the cascade. None means every schema axis
            under its own name; a set names the axes read under their own
            name; a mapping sends an axis to the scope key it reads, so an
            element only sees values published by its own family.
        publishes: Axes this element may establish for its subtree.
        namespace: Prefix for published scope keys ("dropmenu" publishes
            "dropmenu.size"). None publishes under the bare axis name.
    """

    name: str
    schema: VariantSchema
    tag: str = "div"
    inherits: frozenset[str] | Mapping[str, str] | None = None
    publishes: tuple[str, ...] = ()
    namespace: str | None = None

    def scope_key(self, axis: str) -> str | None:
        """Scope key an axis is inherited from, or None if it is not inherited."""
        if self.inherits is None:
            return axis
        if isinstance(self.inherits, Mapping):
            return self.inherits.get(axis)
        return axis if axis in self.inherits else None

    def inheritable(self, axis: str) -> bool:
        return self.scope_key(axis) is not None

    def published_key(self, axis: str) -> str:
        return f"{self.namespace}.{axis}" if self.namespace else axis


@dataclass(frozen=True)
class ComponentInstance:
    """Caller input for one render, split into axes, overrides and attributes."""

    axes: Mapping[str, AxisValue | None] = field(default_factory=lambda: MappingProxyType({}))
    override_tokens: tuple[str, ...] = ()
    attributes: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    ref: RefTarget | None = None


@dataclass(frozen=True)
class RenderContext:
    """
    Everything an element needs during one render pass.

    Threaded explicitly down the construction call tree. Nested scopes are
    carried by new contexts from ``with_scope``; this one is never modified.
    """

    store: CascadeStore
    primitive: PrimitivePort
    glyphs: GlyphPort
    text: TextPort
    rules: KitRules = field(default_factory=KitRules)
    scope: CascadeScope | None = None
    render_pass: RenderPass | None = None

    def with_scope(self, scope: CascadeScope | None) -> RenderContext:
        return replace(self, scope=scope)

    def with_pass(self, render_pass: RenderPass | None) -> RenderContext:
        return replace(self, render_pass=render_pass)

    def read(self, axis: str) -> AxisValue | None:
        return self.store.read_value(axis, self.scope)
