"""
Adapter component - The shared render pattern every element follows.

Lifecycle per render:
    UNINITIALIZED -> CONFIGURED -> STYLED -> FORWARDED -> UNMOUNTED

Invariants:
- I1: Axis precedence is explicit > inherited cascade value > schema default.
- I2: Caller override tokens are merged after all computed tokens.
- I3: Unrecognised attributes are forwarded verbatim and never inspected.
- I4: ConfigurationError is never caught here.
- I5: Values are published under the element's namespace and read only by
  elements that name that key.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Union

from glowkit.components.cascade import ScopeHandle
from glowkit.components.class_merge import merge
from glowkit.components.variants import ResolvedStyle, VariantSchema, resolve
from glowkit.domain.entities import AxisValue, LifecycleState, Node, TokenInput

from .models import ComponentInstance, ElementSpec, Ref, RenderContext

logger = logging.getLogger(__name__)

Child = Union[Node, str, None, Callable[[RenderContext], Any], Iterable[Any]]

CLASS_NAME_PROP = "class_name"
REF_PROP = "ref"


def split_props(spec: ElementSpec, props: Mapping[str, Any]) -> ComponentInstance:
    """Split caller keyword arguments into axes, override tokens, ref and attributes."""
    axes: dict[str, AxisValue | None] = {}
    attributes: dict[str, Any] = {}
    override: TokenInput = None
    ref = None

    for key, value in props.items():
        if key in spec.schema.variants:
            axes[key] = value
        elif key == CLASS_NAME_PROP:
            override = value
        elif key == REF_PROP:
            ref = value
        else:
            attributes[key] = value

    return ComponentInstance(
        axes=MappingProxyType(axes),
        override_tokens=merge(override),
        attributes=MappingProxyType(attributes),
        ref=ref,
    )


def build_children(ctx: RenderContext, children: Child) -> list[Node | str]:
    """
    Construct children inside ``ctx``.

    Callables receive the context so they observe the scope their parent
    established. None entries are skipped; nested iterables are flattened.
    """
    if children is None:
        return []
    if isinstance(children, (Node, str)):
        return [children]
    if callable(children):
        return build_children(ctx, children(ctx))

    built: list[Node | str] = []
    for child in children:
        built.extend(build_children(ctx, child))
    return built


class ElementRender:
    """State for a single render of a single element."""

    def __init__(self, spec: ElementSpec, instance: ComponentInstance, ctx: RenderContext) -> None:
        self.spec = spec
        self.instance = instance
        self.ctx = ctx
        self.state = LifecycleState.UNINITIALIZED
        self.axes: dict[str, AxisValue | None] = {}
        self.inherited: dict[str, AxisValue | None] = {}
        self.resolved: ResolvedStyle | None = None
        self.class_name = ""
        self.node: Node | None = None
        self._handle: ScopeHandle | None = None

        if ctx.render_pass is not None:
            ctx.render_pass.record(self)

    def _require(self, *states: LifecycleState) -> None:
        if self.state not in states:
            allowed = ", ".join(s.value for s in states)
            raise RuntimeError(
                f"{self.spec.name}: expected state {allowed}, got {self.state.value}"
            )

    # --- Configured ---

    def configure(self) -> dict[str, AxisValue | None]:
        """Pick explicit values, falling back to inherited ones where allowed."""
        self._require(LifecycleState.UNINITIALIZED)
        axes: dict[str, AxisValue | None] = {}
        for axis in self.spec.schema.axes:
            key = self.spec.scope_key(axis)
            inherited = self.ctx.read(key) if key is not None else None
            self.inherited[axis] = inherited
            value = self.instance.axes.get(axis)
            axes[axis] = inherited if value is None else value
        self.axes = axes
        self.state = LifecycleState.CONFIGURED
        return axes

    # --- Styled ---

    def style(self, *extra_tokens: TokenInput) -> str:
        """
        Resolve the schema and merge the class string.

        ``extra_tokens`` are element-computed tokens placed between the
        resolved tokens and the caller's override tokens.
        """
        self._require(LifecycleState.CONFIGURED)
        self.resolved = resolve(self.spec.schema, self.axes)
        self.class_name = " ".join(
            merge(self.resolved.tokens, *extra_tokens, self.instance.override_tokens)
        )
        self.state = LifecycleState.STYLED
        return self.class_name

    def value(self, axis: str) -> str:
        """Resolved key for an axis (booleans appear as "true"/"false")."""
        if self.resolved is None:
            raise RuntimeError(f"{self.spec.name}: axis values are not resolved yet")
        return self.resolved.axes[axis]

    def flag(self, axis: str) -> bool:
        return self.value(axis) == "true"

    # --- Scope ---

    def establish(self, **values: AxisValue | None) -> RenderContext:
        """
        Establish a scope for this element's subtree.

        Returns the context children must be built with. The scope is
        released when the element unmounts.
        """
        self._require(LifecycleState.CONFIGURED, LifecycleState.STYLED)
        unknown = [axis for axis in values if axis not in self.spec.publishes]
        if unknown:
            raise ValueError(f"{self.spec.name} does not publish axes: {', '.join(unknown)}")
        if self._handle is not None:
            raise RuntimeError(f"{self.spec.name} already established a scope")

        published = {self.spec.published_key(axis): value for axis, value in values.items()}
        self._handle = self.ctx.store.establish_scope(
            published, parent=self.ctx.scope, owner=self.spec.name
        )
        return self.ctx.with_scope(self._handle.scope)

    # --- Forwarded ---

    def forward(
        self,
        children: Iterable[Node | str] = (),
        *,
        attributes: Mapping[str, Any] | None = None,
        tag: str | None = None,
        build: Callable[[str, dict[str, Any]], Node] | None = None,
    ) -> Node:
        """
        Create the root node and write the output handle.

        Element-owned ``attributes`` come first; caller attributes are
        applied over them verbatim. ``build`` replaces the generic primitive
        when the element renders through the glyph or text port.
        """
        self._require(LifecycleState.STYLED)
        attrs: dict[str, Any] = dict(attributes or {})
        attrs.update(self.instance.attributes)

        if build is not None:
            node = build(self.class_name, attrs)
        else:
            node = self.ctx.primitive.element(
                tag or self.spec.tag, self.class_name, attrs, list(children)
            )

        ref = self.instance.ref
        if isinstance(ref, Ref):
            ref.attach(node)
        elif ref is not None:
            ref(node)

        self.node = node
        self.state = LifecycleState.FORWARDED
        return node

    # --- Unmounted ---

    def unmount(self) -> None:
        if self.state is LifecycleState.UNMOUNTED:
            return
        if self._handle is not None:
            self._handle.release()
            logger.debug("%s released its cascade scope", self.spec.name)
        ref = self.instance.ref
        if isinstance(ref, Ref):
            ref.detach()
        elif ref is not None and self.node is not None:
            ref(None)
        self.state = LifecycleState.UNMOUNTED


class ElementAdapter:
    """Binds an ElementSpec to the shared render pattern."""

    def __init__(self, spec: ElementSpec) -> None:
        self.spec = spec

    @property
    def schema(self) -> VariantSchema:
        return self.spec.schema

    def begin(self, ctx: RenderContext, props: Mapping[str, Any]) -> ElementRender:
        """Split props and run the configure step."""
        render = ElementRender(self.spec, split_props(self.spec, props), ctx)
        render.configure()
        return render

    def render(self, ctx: RenderContext, children: Child = None, **props: Any) -> Node:
        """Configure, style and forward with no element-specific behaviour."""
        render = self.begin(ctx, props)
        render.style()
        return render.forward(build_children(ctx, children))


class RenderPass:
    """Records the element renders of one pass so they can be unmounted together."""

    def __init__(self) -> None:
        self.renders: list[ElementRender] = []

    def record(self, render: ElementRender) -> None:
        self.renders.append(render)

    def unmount(self) -> None:
        for render in reversed(self.renders):
            render.unmount()


@dataclass
class MountedTree:
    """Root node of a render pass plus the handle to unmount it."""

    node: Node
    render_pass: RenderPass = field(default_factory=RenderPass)

    def unmount(self) -> None:
        self.render_pass.unmount()


def mount(ctx: RenderContext, build: Callable[[RenderContext], Node]) -> MountedTree:
    """Run one render pass and return the mounted tree."""
    render_pass = RenderPass()
    node = build(ctx.with_pass(render_pass))
    return MountedTree(node=node, render_pass=render_pass)
