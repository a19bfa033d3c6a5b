"""
Button group elements - Segmented control built from grouped items.

ButtonGroup establishes ``size`` for its items; an item's own size wins.
Items receive their position (first/middle/last/only) from the group.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import partial
from typing import Any, Literal

from glowkit.components.adapter import (
    Child,
    ElementAdapter,
    ElementSpec,
    RenderContext,
    build_children,
)
from glowkit.components.class_merge import merge
from glowkit.components.variants import define_variants
from glowkit.domain.entities import Node, Position, Size
from glowkit.rules import dev_warn

from .icon import icon

logger = logging.getLogger(__name__)

# --- ButtonGroupItem ---

BUTTON_GROUP_ITEM_VARIANTS = define_variants(
    [
        "inline-flex items-center justify-center gap-2",
        "cursor-pointer",
        "font-medium",
        "border border-border",
        "bg-background",
        "text-text-tertiary",
        "transition-colors duration-150",
        "focus-visible:ring-2 focus-visible:ring-primary focus-visible:ring-offset-2 "
        "focus-visible:outline-none",
        "disabled:pointer-events-none disabled:cursor-not-allowed "
        "disabled:border-border-disabled disabled:bg-background "
        "disabled:text-text-secondary disabled:opacity-52",
    ],
    variants={
        "size": {
            "sm": "h-8 px-3 py-2 text-sm",
            "md": "h-10 px-3.5 py-2.5 text-base",
            "lg": "h-12 px-4 py-3 text-base",
        },
        # Border radius comes only from position, never from base
        "position": {
            "first": "rounded-l-sm",
            "middle": "",
            "last": "rounded-r-sm",
            "only": "rounded-sm",
        },
        "selected": {
            True: "bg-fill-tertiary text-text-subtle",
            False: "",
        },
    },
    compound=[
        {"selected": False, "class_name": "hover:border-border-hover hover:text-text-subtle"},
    ],
    defaults={"size": "md", "position": "middle", "selected": False},
    name="ButtonGroupItem",
)

BUTTON_GROUP_ITEM_ICON_SIZE_MAP = {"sm": "sm", "md": "md", "lg": "lg"}

ICON_ONLY_CLASS = "aspect-square px-0"

BUTTON_GROUP_ITEM = ElementAdapter(
    ElementSpec(
        name="ButtonGroupItem",
        schema=BUTTON_GROUP_ITEM_VARIANTS,
        tag="button",
        inherits={"size": "button_group.size"},
    )
)


def button_group_item(
    ctx: RenderContext,
    label: Child = None,
    *,
    left_icon: str | None = None,
    right_icon: str | None = None,
    disabled: bool = False,
    **props: Any,
) -> Node:
    """
    Render one selectable item of a segmented control.

    Icon-only items (no label, a left icon) are rendered square and need an
    ``aria-label``.
    """
    render = BUTTON_GROUP_ITEM.begin(ctx, props)
    children = build_children(ctx, label)
    is_icon_only = not children and left_icon is not None
    render.style(is_icon_only and ICON_ONLY_CLASS)

    if not children and not render.instance.attributes.get("aria-label"):
        dev_warn(
            ctx.rules,
            logger,
            "ButtonGroupItem: icon-only buttons require an aria-label for accessibility",
        )

    icon_size = BUTTON_GROUP_ITEM_ICON_SIZE_MAP[render.value("size")]
    content: list[Node | str] = []
    if left_icon is not None:
        content.append(icon(ctx, left_icon, size=icon_size, color="inherit"))
    content.extend(children)
    if right_icon is not None:
        content.append(icon(ctx, right_icon, size=icon_size, color="inherit"))

    # aria-pressed only reflects an explicit selection
    selected = render.instance.axes.get("selected")
    return render.forward(
        content,
        attributes={
            "type": "button",
            "disabled": disabled or None,
            "aria-pressed": None if selected is None else ("true" if selected else "false"),
            "aria-disabled": disabled or None,
        },
    )


# --- ButtonGroup ---

BUTTON_GROUP_VARIANTS = define_variants(
    "isolate inline-flex",
    variants={"hug": {True: "", False: "w-full"}},
    defaults={"hug": True},
    name="ButtonGroup",
)

BUTTON_GROUP = ElementAdapter(
    ElementSpec(
        name="ButtonGroup",
        schema=BUTTON_GROUP_VARIANTS,
        inherits=frozenset(),
        publishes=("size",),
        namespace="button_group",
    )
)


def get_position(index: int, total: int) -> Position:
    """Position of an item within a group of ``total`` items."""
    if total == 1:
        return "only"
    if index == 0:
        return "first"
    if index == total - 1:
        return "last"
    return "middle"


def _is_group_item(item: Any) -> bool:
    return isinstance(item, partial) and item.func is button_group_item


def button_group(
    ctx: RenderContext,
    items: Iterable[Any] = (),
    *,
    size: Size | None = None,
    orientation: Literal["horizontal", "vertical"] = "horizontal",
    role: Literal["group", "radiogroup", "toolbar"] = "group",
    **props: Any,
) -> Node:
    """
    Render a group of items.

    ``items`` are ``functools.partial(button_group_item, ...)`` objects
    without the context argument; the group supplies the context, position
    and layout tokens when building them. Anything else is skipped with a developer warning.
    """
    render = BUTTON_GROUP.begin(ctx, props)
    render.style()
    hug = render.flag("hug")

    item_list = list(items)
    valid = [item for item in item_list if _is_group_item(item)]
    invalid_count = len(item_list) - len(valid)
    if invalid_count:
        dev_warn(
            ctx.rules,
            logger,
            "ButtonGroup: expected only ButtonGroupItem children, found %d invalid child(ren)",
            invalid_count,
        )

    child_ctx = render.establish(size=size)
    children: list[Node | str] = []
    for index, item in enumerate(valid):
        class_name = merge(
            index > 0 and "-ml-px",
            not hug and "flex-1",
            item.keywords.get("class_name"),
        )
        keywords = {
            **item.keywords,
            "position": get_position(index, len(valid)),
            "class_name": class_name,
        }
        children.append(item.func(child_ctx, *item.args, **keywords))

    return render.forward(
        children,
        attributes={"role": role, "aria-orientation": orientation},
    )
