"""
Checkbox element - Checkbox control with checked, unchecked and
indeterminate states.

Sizes: sm (16px), md (20px), lg (24px). The indicator glyph is sized from
the checkbox size through CHECKBOX_ICON_SIZE_MAP.
"""

from __future__ import annotations

from typing import Any

from glowkit.components.adapter import ElementAdapter, ElementSpec, RenderContext
from glowkit.components.variants import define_variants
from glowkit.domain.entities import Node

from .icon import icon

CHECKBOX_VARIANTS = define_variants(
    [
        # Base styles
        "inline-flex items-center justify-center",
        "shrink-0",
        "rounded-xs",
        "border",
        "transition-colors duration-150",
        "cursor-pointer",
        # Focus state (keyboard navigation)
        "focus-visible:ring-2 focus-visible:ring-primary/20 focus-visible:outline-none",
        # Disabled state
        "disabled:cursor-not-allowed disabled:opacity-52",
        # Unchecked default and hover
        "border-border bg-background",
        "hover:border-border-hover hover:bg-background-secondary",
        # Checked/indeterminate states
        "data-[state=checked]:border-fill-primary data-[state=checked]:bg-fill-primary",
        "data-[state=indeterminate]:border-fill-primary "
        "data-[state=indeterminate]:bg-fill-primary",
        # Disabled unchecked
        "disabled:border-border-disabled disabled:bg-background-tertiary",
    ],
    variants={
        "size": {
            "sm": "size-4",  # 16px
            "md": "size-5",  # 20px
            "lg": "size-6",  # 24px
        },
        "error": {
            True: [
                "border-destructive",
                "hover:border-destructive-hover",
                "data-[state=checked]:border-destructive data-[state=checked]:bg-destructive",
                "data-[state=indeterminate]:border-destructive "
                "data-[state=indeterminate]:bg-destructive",
            ],
            False: "",
        },
    },
    defaults={"size": "md", "error": False},
    name="Checkbox",
)

CHECKBOX_ICON_SIZE_MAP = {"sm": "xs", "md": "sm", "lg": "sm"}

INDICATOR_CLASS = "flex items-center justify-center text-text-overlay-white"

CHECKBOX = ElementAdapter(
    ElementSpec(
        name="Checkbox",
        schema=CHECKBOX_VARIANTS,
        tag="button",
        inherits=frozenset(),
    )
)

_ARIA_CHECKED = {"checked": "true", "unchecked": "false", "indeterminate": "mixed"}


def _checked_state(checked: bool | str, indeterminate: bool) -> str:
    if indeterminate or checked == "indeterminate":
        return "indeterminate"
    return "checked" if checked is True else "unchecked"


def checkbox(
    ctx: RenderContext,
    *,
    checked: bool | str = False,
    indeterminate: bool = False,
    disabled: bool = False,
    **props: Any,
) -> Node:
    """
    Render a checkbox.

    ``indeterminate=True`` wins over ``checked``, matching "select all"
    controls where only some items are selected.
    """
    render = CHECKBOX.begin(ctx, props)
    render.style()

    state = _checked_state(checked, indeterminate)
    children: list[Node | str] = []
    if state != "unchecked":
        glyph = "minus" if state == "indeterminate" else "check"
        children.append(
            ctx.primitive.element(
                "span",
                INDICATOR_CLASS,
                {"data-state": state},
                [
                    icon(
                        ctx,
                        glyph,
                        size=CHECKBOX_ICON_SIZE_MAP[render.value("size")],
                        weight="bold",
                        color="inherit",
                    )
                ],
            )
        )

    return render.forward(
        children,
        attributes={
            "type": "button",
            "role": "checkbox",
            "aria-checked": _ARIA_CHECKED[state],
            "data-state": state,
            "disabled": disabled or None,
        },
    )
