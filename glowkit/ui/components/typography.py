"""
Typography elements - Text rendered through the text port.
"""

from __future__ import annotations

from typing import Any

from glowkit.components.adapter import (
    Child,
    ElementAdapter,
    ElementSpec,
    RenderContext,
    build_children,
)
from glowkit.components.variants import define_variants
from glowkit.domain.entities import Node

TEXT_VARIANTS = define_variants(
    "font-sans",
    variants={
        "size": {
            "xs": "text-xs leading-[18px]",
            "sm": "text-sm leading-5",
            "md": "text-base leading-6",
            "lg": "text-lg leading-7",
        },
        "weight": {
            "regular": "font-normal",
            "medium": "font-medium",
            "semibold": "font-semibold",
            "bold": "font-bold",
        },
        "color": {
            "default": "text-text-primary",
            "muted": "text-text-secondary",
            "primary": "text-primary",
            "secondary": "text-secondary",
            "destructive": "text-destructive",
            "success": "text-success",
            "warning": "text-warning",
            "info": "text-info",
        },
    },
    defaults={"size": "md", "weight": "regular", "color": "default"},
    name="Text",
)

TEXT = ElementAdapter(
    ElementSpec(name="Text", schema=TEXT_VARIANTS, tag="p", inherits=frozenset())
)


def text(ctx: RenderContext, content: Child, *, as_: str = "p", **props: Any) -> Node:
    """Render text content with a semantic colour token."""
    render = TEXT.begin(ctx, props)
    render.style()
    children = build_children(ctx, content)
    return render.forward(
        build=lambda class_name, attrs: ctx.text.write(
            as_, children, class_name=class_name, attributes=attrs
        ),
    )
