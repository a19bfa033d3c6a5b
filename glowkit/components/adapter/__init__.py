"""
Adapter component - Composite element adapter.

Resolves axis values (explicit > inherited > default), calls the variant
resolver, merges caller overrides, forwards unrelated attributes and exposes
the element's root node through an output handle.
"""

from .component import (
    Child,
    ElementAdapter,
    ElementRender,
    MountedTree,
    RenderPass,
    build_children,
    mount,
    split_props,
)
from .models import ComponentInstance, ElementSpec, Ref, RenderContext

__all__ = [
    # Entry points
    "Child",
    "ElementAdapter",
    "ElementRender",
    "build_children",
    "mount",
    "split_props",
    # Lifecycle
    "MountedTree",
    "RenderPass",
    # Models
    "ComponentInstance",
    "ElementSpec",
    "Ref",
    "RenderContext",
]
