"""
Quantity input elements - Numeric field flanked by minus/plus stepper buttons.

``quantity_input`` establishes ``size`` for its stepper buttons. A button
``type`` has no default and must always be given.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import uuid4

from glowkit.components.adapter import (
    Child,
    ElementAdapter,
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

QUANTITY_INPUT_BUTTON_VARIANTS = define_variants(
    [
        # Layout & cursor
        "inline-flex items-center justify-center",
        "cursor-pointer",
        # Default state colors
        "border border-border",
        "bg-background",
        "text-text-tertiary",
        "transition-colors duration-150",
        # Hover and active
        "hover:bg-background-secondary hover:border-border-hover hover:text-text-subtle",
        "active:bg-background-tertiary active:text-text-subtle",
        # Focus
        "focus-visible:ring-2 focus-visible:ring-primary",
        "focus-visible:ring-offset-2 focus-visible:outline-none",
        # Disabled
        "disabled:border-border-disabled disabled:bg-background",
        "disabled:text-text-secondary disabled:opacity-52",
        "disabled:pointer-events-none",
    ],
    variants={
        "type": {
            "minus": "rounded-l-sm border-t border-r-0 border-b border-l",
            "plus": "rounded-r-sm border-t border-r border-b border-l-0",
        },
        "size": {
            "sm": "h-8 px-2.5 py-2 text-sm",
            "md": "h-10 px-3 py-2.5 text-base",
            "lg": "h-12 px-4 py-3.5 text-base",
        },
    },
    defaults={"size": "lg"},
    name="QuantityInputButton",
)

QUANTITY_ICON_SIZE_MAP = {"sm": "sm", "md": "md", "lg": "md"}

QUANTITY_INPUT_BUTTON = ElementAdapter(
    ElementSpec(
        name="QuantityInputButton",
        schema=QUANTITY_INPUT_BUTTON_VARIANTS,
        tag="button",
        inherits={"size": "quantity_input.size"},
    )
)


def quantity_input_button(
    ctx: RenderContext,
    *,
    disabled: bool = False,
    **props: Any,
) -> Node:
    """
    Render a minus or plus stepper button.

    Raises:
        MissingAxisResolution: If ``type`` is not given.
    """
    render = QUANTITY_INPUT_BUTTON.begin(ctx, props)
    render.style()

    if not render.instance.attributes.get("aria-label"):
        dev_warn(
            ctx.rules,
            logger,
            "QuantityInputButton: icon-only buttons require an aria-label, "
            'e.g. aria-label="Increase quantity"',
        )

    glyph = "plus" if render.value("type") == "plus" else "minus"
    mark = icon(
        ctx,
        glyph,
        size=QUANTITY_ICON_SIZE_MAP[render.value("size")],
        color="inherit",
    )
    return render.forward(
        [mark],
        attributes={
            "type": "button",
            "disabled": disabled or None,
            "aria-disabled": disabled or None,
        },
    )


# --- QuantityInput ---

QUANTITY_INPUT_VARIANTS = define_variants(
    "flex flex-col",
    variants={
        # Size and error style the inner wrapper and field, not the column
        "size": {"sm": "", "md": "", "lg": ""},
        "error": {True: "", False: ""},
    },
    defaults={"size": "lg", "error": False},
    name="QuantityInput",
)

QUANTITY_INPUT_WRAPPER_VARIANTS = define_variants(
    [
        "inline-flex items-center",
        "transition-colors duration-150",
        "focus-within:ring-2 focus-within:ring-primary/20",
    ],
    variants={
        "size": {"sm": "h-8", "md": "h-10", "lg": "h-12"},
        "error": {True: "focus-within:ring-destructive/20", False: ""},
    },
    defaults={"size": "lg", "error": False},
    name="QuantityInputWrapper",
)

QUANTITY_INPUT_FIELD_VARIANTS = define_variants(
    [
        "text-center",
        "bg-background",
        "border-y border-border",
        "outline-none",
        "text-text-primary",
        "placeholder:text-text-tertiary",
        "transition-colors duration-150",
        "hover:border-border-hover",
        "disabled:cursor-not-allowed disabled:bg-background-secondary "
        "disabled:text-text-tertiary",
        # Hide native number spinners
        "[appearance:textfield]",
        "[&::-webkit-outer-spin-button]:appearance-none",
        "[&::-webkit-inner-spin-button]:appearance-none",
    ],
    variants={
        "size": {
            "sm": "h-8 w-10 text-sm leading-5",
            "md": "h-10 w-12 text-sm leading-5",
            "lg": "h-12 w-16 text-base leading-6",
        },
        "error": {True: "border-destructive hover:border-destructive", False: ""},
    },
    defaults={"size": "lg", "error": False},
    name="QuantityInputField",
)

# Label, hint and error message size per field size
QUANTITY_LABEL_SIZE_MAP = {"sm": "sm", "md": "sm", "lg": "md"}

QUANTITY_INPUT = ElementAdapter(
    ElementSpec(
        name="QuantityInput",
        schema=QUANTITY_INPUT_VARIANTS,
        inherits=frozenset(),
        publishes=("size",),
        namespace="quantity_input",
    )
)


def quantity_input(
    ctx: RenderContext,
    *,
    value: float | None = None,
    default_value: float | None = None,
    min: float | None = None,
    max: float | None = None,
    step: float = 1,
    label: str | None = None,
    hint: str | None = None,
    error_message: str | None = None,
    input_id: str | None = None,
    disabled: bool = False,
    decrease_aria_label: str = "Decrease quantity",
    increase_aria_label: str = "Increase quantity",
    decrease_button: Child = None,
    increase_button: Child = None,
    **props: Any,
) -> Node:
    """
    Render a numeric field between a minus and a plus button.

    The stepper buttons inherit the field size. A button reaching the
    minimum or maximum is disabled. ``decrease_button`` and
    ``increase_button`` replace the default buttons and are built inside the
    field's size scope.

    The hint is shown only without an error; the error message only with
    ``error=True``.
    """
    render = QUANTITY_INPUT.begin(ctx, props)
    render.style()
    size = render.value("size")
    error = render.flag("error")
    child_ctx = render.establish(size=size)

    current = value if value is not None else default_value
    if current is None:
        current = min if min is not None else 0
    can_decrement = not disabled and (min is None or current > min)
    can_increment = not disabled and (max is None or current < max)

    field_id = input_id or f"quantity-input-{uuid4().hex[:8]}"
    show_hint = bool(hint) and not error
    show_error = error and bool(error_message)
    hint_id = f"{field_id}-hint" if show_hint else None
    error_id = f"{field_id}-error" if show_error else None
    described_by = " ".join(part for part in (hint_id, error_id) if part) or None
    child_size = QUANTITY_LABEL_SIZE_MAP[size]

    if decrease_button is None:
        decrease_button = lambda c: quantity_input_button(  # noqa: E731
            c, type="minus", disabled=not can_decrement, **{"aria-label": decrease_aria_label}
        )
    if increase_button is None:
        increase_button = lambda c: quantity_input_button(  # noqa: E731
            c, type="plus", disabled=not can_increment, **{"aria-label": increase_aria_label}
        )

    field = ctx.primitive.element(
        "input",
        QUANTITY_INPUT_FIELD_VARIANTS(size=size, error=error),
        {
            "id": field_id,
            "type": "number",
            "role": "spinbutton",
            "disabled": disabled or None,
            "min": min,
            "max": max,
            "step": step,
            "value": value if value is not None else default_value,
            "aria-invalid": True if error else None,
            "aria-valuenow": current,
            "aria-valuemin": min,
            "aria-valuemax": max,
            "aria-describedby": described_by,
        },
        [],
    )
    wrapper = ctx.primitive.element(
        "div",
        QUANTITY_INPUT_WRAPPER_VARIANTS(size=size, error=error),
        {},
        [
            *build_children(child_ctx, decrease_button),
            field,
            *build_children(child_ctx, increase_button),
        ],
    )

    children: list[Node | str] = []
    if label:
        children.append(
            text(ctx, label, as_="label", size=child_size, weight="medium", **{"for": field_id})
        )
    children.append(wrapper)
    if show_hint:
        children.append(text(ctx, hint, size=child_size, color="muted", id=hint_id))
    if show_error:
        children.append(
            text(
                ctx,
                error_message,
                size=child_size,
                color="destructive",
                id=error_id,
                role="alert",
            )
        )

    return render.forward(children)
