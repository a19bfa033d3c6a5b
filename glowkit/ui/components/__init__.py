"""Element catalogue built on the shared element adapter."""

from .button_group import (
    BUTTON_GROUP_ITEM_VARIANTS,
    BUTTON_GROUP_VARIANTS,
    button_group,
    button_group_item,
    get_position,
)
from .checkbox import CHECKBOX_ICON_SIZE_MAP, CHECKBOX_VARIANTS, checkbox
from .dropmenu import (
    DROPMENU_CONTENT_VARIANTS,
    DROPMENU_HEADER_VARIANTS,
    DROPMENU_OPTION_VARIANTS,
    dropmenu,
    dropmenu_content,
    dropmenu_divider,
    dropmenu_footer,
    dropmenu_header,
    dropmenu_option,
)
from .icon import ICON_SIZE_PX, ICON_VARIANTS, icon
from .quantity_input import (
    QUANTITY_INPUT_BUTTON_VARIANTS,
    QUANTITY_INPUT_FIELD_VARIANTS,
    QUANTITY_INPUT_VARIANTS,
    QUANTITY_INPUT_WRAPPER_VARIANTS,
    QUANTITY_LABEL_SIZE_MAP,
    quantity_input,
    quantity_input_button,
)
from .typography import TEXT_VARIANTS, text

__all__ = [
    # Elements
    "button_group",
    "button_group_item",
    "checkbox",
    "dropmenu",
    "dropmenu_content",
    "dropmenu_divider",
    "dropmenu_footer",
    "dropmenu_header",
    "dropmenu_option",
    "icon",
    "quantity_input",
    "quantity_input_button",
    "text",
    # Helpers
    "get_position",
    # Schemas
    "BUTTON_GROUP_ITEM_VARIANTS",
    "BUTTON_GROUP_VARIANTS",
    "CHECKBOX_VARIANTS",
    "DROPMENU_CONTENT_VARIANTS",
    "DROPMENU_HEADER_VARIANTS",
    "DROPMENU_OPTION_VARIANTS",
    "ICON_VARIANTS",
    "QUANTITY_INPUT_BUTTON_VARIANTS",
    "QUANTITY_INPUT_FIELD_VARIANTS",
    "QUANTITY_INPUT_VARIANTS",
    "QUANTITY_INPUT_WRAPPER_VARIANTS",
    "TEXT_VARIANTS",
    # Size maps
    "CHECKBOX_ICON_SIZE_MAP",
    "ICON_SIZE_PX",
    "QUANTITY_LABEL_SIZE_MAP",
]
