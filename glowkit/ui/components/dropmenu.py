"""
Dropmenu elements - Menu surface whose size flows to its parts.

``dropmenu`` establishes ``size`` for everything built inside it. Content,
option, header and footer read it unless given a size of their own. Outside
a dropmenu they log a developer warning and fall back to their default (lg).
Other elements placed inside a menu never see its size.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any

from glowkit.components.adapter import (
    Child,
    ElementAdapter,
    ElementRender,
    ElementSpec,
    RenderContext,
    build_children,
)
from glowkit.components.variants import define_variants
from glowkit.domain.entities import Node
from glowkit.rules import dev_warn

from .icon import icon
from .typography import text

logger = logging.getLogger(__name__)

# Parts read only the size a Dropmenu published, never another family's size.
DROPMENU_SIZE = MappingProxyType({"size": "dropmenu.size"})


def _warn_outside_menu(ctx: RenderContext, render: ElementRender) -> None:
    if render.inherited.get("size") is None:
        dev_warn(
            ctx.rules,
            logger,
            "%s must be used within a Dropmenu; falling back to its default size",
            render.spec.name,
        )


# --- Dropmenu ---

DROPMENU_VARIANTS = define_variants(
    variants={"size": {"sm": "", "md": "", "lg": ""}},
    defaults={"size": "lg"},
    name="Dropmenu",
)

DROPMENU = ElementAdapter(
    ElementSpec(
        name="Dropmenu",
        schema=DROPMENU_VARIANTS,
        inherits=frozenset(),
        publishes=("size",),
        namespace="dropmenu",
    )
)


def dropmenu(ctx: RenderContext, children: Child = None, **props: Any) -> Node:
    """Render the menu wrapper and build ``children`` inside its size scope."""
    render = DROPMENU.begin(ctx, props)
    render.style()
    child_ctx = render.establish(size=render.value("size"))
    return render.forward(build_children(child_ctx, children))


# --- DropmenuContent ---

DROPMENU_CONTENT_VARIANTS = define_variants(
    "flex flex-col overflow-clip rounded-sm border border-border-secondary bg-background shadow-lg",
    variants={
        "size": {
            "sm": "w-[220px] max-w-[calc(100vw-2rem)]",
            "md": "w-[240px] max-w-[calc(100vw-2rem)]",
            "lg": "w-[260px] max-w-[calc(100vw-2rem)]",
        },
    },
    defaults={"size": "lg"},
    name="DropmenuContent",
)

DROPMENU_CONTENT = ElementAdapter(
    ElementSpec(name="DropmenuContent", schema=DROPMENU_CONTENT_VARIANTS, inherits=DROPMENU_SIZE),
)


def dropmenu_content(ctx: RenderContext, children: Child = None, **props: Any) -> Node:
    render = DROPMENU_CONTENT.begin(ctx, props)
    _warn_outside_menu(ctx, render)
    render.style()
    return render.forward(
        build_children(ctx, children),
        attributes={"role": "menu", "aria-orientation": "vertical"},
    )


# --- DropmenuOption ---

DROPMENU_OPTION_VARIANTS = define_variants(
    [
        "flex w-full cursor-pointer items-center rounded-sm transition-colors duration-150",
        "hover:bg-background-secondary active:bg-background-tertiary",
        "focus-visible:ring-2 focus-visible:ring-border-brand focus-visible:ring-offset-2 "
        "focus-visible:outline-none",
        "disabled:pointer-events-none disabled:cursor-not-allowed",
    ],
    variants={
        "size": {
            "sm": "gap-2.5 px-3 py-1.5 text-sm leading-5",
            "md": "gap-3 px-3 py-2.5 text-sm leading-5",
            "lg": "gap-3 px-4 py-3 text-base leading-6",
        },
        "visual_state": {
            "default": "",
            "hovered": "bg-background-secondary",
            "pressed": "bg-background-tertiary",
            "focus": "ring-2 ring-border-brand ring-offset-2",
        },
    },
    defaults={"size": "lg", "visual_state": "default"},
    name="DropmenuOption",
)

OPTION_ICON_SIZE_MAP = {"sm": "sm", "md": "sm", "lg": "md"}
OPTION_TEXT_SIZE_MAP = {"sm": "sm", "md": "sm", "lg": "md"}

DROPMENU_OPTION = ElementAdapter(
    ElementSpec(name="DropmenuOption", schema=DROPMENU_OPTION_VARIANTS, inherits=DROPMENU_SIZE),
)


def dropmenu_option(
    ctx: RenderContext,
    label: str,
    *,
    left_icon: str | None = None,
    left_add_on: Child = None,
    right_text: str | None = None,
    right_add_on: Child = None,
    disabled: bool = False,
    **props: Any,
) -> Node:
    """
    Render a menu item.

    A ``left_add_on`` replaces the left icon and a ``right_add_on``
    replaces the right text.
    """
    render = DROPMENU_OPTION.begin(ctx, props)
    _warn_outside_menu(ctx, render)
    render.style(disabled and "pointer-events-none text-text-tertiary")
    size = render.value("size")
    tone = "text-text-tertiary" if disabled else "text-text-primary"

    content: list[Node | str] = []
    if left_add_on is not None:
        content.extend(build_children(ctx, left_add_on))
    elif left_icon is not None:
        content.append(
            icon(
                ctx,
                left_icon,
                size=OPTION_ICON_SIZE_MAP[size],
                color="inherit",
                class_name=tone,
            )
        )

    content.append(
        ctx.primitive.element("span", f"flex-1 truncate font-sans {tone}", {}, [label])
    )

    if right_add_on is not None:
        content.extend(build_children(ctx, right_add_on))
    elif right_text is not None:
        content.append(
            text(
                ctx,
                right_text,
                as_="span",
                size=OPTION_TEXT_SIZE_MAP[size],
                color="muted",
                class_name=["ml-auto shrink-0", disabled and "text-text-tertiary"],
            )
        )

    return render.forward(
        content,
        attributes={"role": "menuitem", "aria-disabled": disabled or None},
    )


# --- DropmenuHeader ---

DROPMENU_HEADER_VARIANTS = define_variants(
    "w-full pb-0 font-sans font-medium text-text-secondary",
    variants={
        "size": {
            "sm": "px-3 pt-3 text-xs leading-[18px]",
            "md": "px-4 pt-4 text-sm leading-5",
            "lg": "px-4 pt-4 text-sm leading-5",
        },
    },
    defaults={"size": "lg"},
    name="DropmenuHeader",
)

DROPMENU_HEADER = ElementAdapter(
    ElementSpec(name="DropmenuHeader", schema=DROPMENU_HEADER_VARIANTS, inherits=DROPMENU_SIZE),
)


def dropmenu_header(ctx: RenderContext, label: str, **props: Any) -> Node:
    render = DROPMENU_HEADER.begin(ctx, props)
    _warn_outside_menu(ctx, render)
    render.style()
    return render.forward([ctx.primitive.element("p", "", {}, [label])])


# --- DropmenuFooter ---

DROPMENU_FOOTER_VARIANTS = define_variants(
    "w-[200px] bg-background-secondary py-2",
    variants={"size": {"sm": "px-3", "md": "pl-4 pr-2", "lg": "pl-4 pr-2"}},
    defaults={"size": "lg"},
    name="DropmenuFooter",
)

FOOTER_TEXT_SIZE_MAP = {"sm": "xs", "md": "sm", "lg": "sm"}

DROPMENU_FOOTER = ElementAdapter(
    ElementSpec(name="DropmenuFooter", schema=DROPMENU_FOOTER_VARIANTS, inherits=DROPMENU_SIZE),
)


def dropmenu_footer(ctx: RenderContext, children: Child = None, **props: Any) -> Node:
    render = DROPMENU_FOOTER.begin(ctx, props)
    _warn_outside_menu(ctx, render)
    render.style()
    note = text(
        ctx,
        build_children(ctx, children),
        as_="span",
        size=FOOTER_TEXT_SIZE_MAP[render.value("size")],
        color="muted",
    )
    return render.forward([note])


# --- DropmenuDivider ---

DROPMENU_DIVIDER_VARIANTS = define_variants("w-full bg-background py-0.5", name="DropmenuDivider")

DROPMENU_DIVIDER = ElementAdapter(
    ElementSpec(name="DropmenuDivider", schema=DROPMENU_DIVIDER_VARIANTS)
)


def dropmenu_divider(ctx: RenderContext, **props: Any) -> Node:
    render = DROPMENU_DIVIDER.begin(ctx, props)
    render.style()
    rule = ctx.primitive.element("div", "h-px w-full bg-fill-tertiary", {}, [])
    return render.forward([rule], attributes={"role": "separator"})
