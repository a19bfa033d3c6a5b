from __future__ import annotations

from glowkit.adapters.markup import MarkupRenderer
from glowkit.components.adapter import RenderContext
from glowkit.components.cascade import CascadeStore
from glowkit.rules import KitRules, default_rules


def create_render_context(
    rules: KitRules | None = None,
    renderer: MarkupRenderer | None = None,
) -> RenderContext:
    """
    Wire a root RenderContext.

    The markup renderer serves all three rendering ports unless another
    implementation is supplied.
    """
    rules = rules or default_rules()
    renderer = renderer or MarkupRenderer()
    return RenderContext(
        store=CascadeStore(rules.cascade.defaults),
        primitive=renderer,
        glyphs=renderer,
        text=renderer,
        rules=rules,
    )
