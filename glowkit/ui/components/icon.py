"""
Icon element - Glyph rendered through the glyph port.
"""

from __future__ import annotations

from typing import Any

from glowkit.components.adapter import ElementAdapter, ElementSpec, RenderContext
from glowkit.components.variants import define_variants
from glowkit.domain.entities import Node

ICON_VARIANTS = define_variants(
    "inline-flex shrink-0",
    variants={
        "size": {
            "xs": "size-3",  # 12px
            "sm": "size-4",  # 16px
            "md": "size-5",  # 20px
            "lg": "size-6",  # 24px
            "xl": "size-8",  # 32px
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
            # currentColor from the parent
            "inherit": "",
        },
        "weight": {
            "thin": "",
            "light": "",
            "regular": "",
            "bold": "",
            "fill": "",
            "duotone": "",
        },
    },
    defaults={"size": "md", "color": "default", "weight": "regular"},
    name="Icon",
)

ICON_SIZE_PX = {"xs": 12, "sm": 16, "md": 20, "lg": 24, "xl": 32}

# Icons size themselves; they never pick up a surrounding menu or group size.
ICON = ElementAdapter(
    ElementSpec(name="Icon", schema=ICON_VARIANTS, tag="svg", inherits=frozenset())
)


def icon(ctx: RenderContext, glyph: str, **props: Any) -> Node:
    """
    Render a glyph.

    With an ``aria-label`` the icon is exposed as ``role="img"``; otherwise
    it is hidden from assistive technology unless ``aria-hidden`` is given.
    """
    render = ICON.begin(ctx, props)
    render.style()

    label = render.instance.attributes.get("aria-label")
    a11y: dict[str, Any] = {"role": "img"} if label else {"aria-hidden": True}
    size_px = ICON_SIZE_PX[render.value("size")]
    weight = render.value("weight")

    return render.forward(
        attributes=a11y,
        build=lambda class_name, attrs: ctx.glyphs.draw(
            glyph, size=size_px, weight=weight, class_name=class_name, attributes=attrs
        ),
    )
