"""
glowkit - Variant resolution and configuration cascade for presentational
UI elements.
"""

from glowkit.adapters import MarkupRenderer, render_html
from glowkit.components.adapter import (
    ElementAdapter,
    ElementSpec,
    Ref,
    RenderContext,
    mount,
)
from glowkit.components.cascade import CascadeScope, CascadeStore
from glowkit.components.class_merge import cn, effective_tokens, merge
from glowkit.components.variants import (
    CompoundRule,
    ResolvedStyle,
    VariantSchema,
    define_variants,
    resolve,
)
from glowkit.domain.errors import (
    ConfigurationError,
    InvalidVariantValue,
    KitRulesError,
    MissingAxisResolution,
)
from glowkit.ui import create_render_context

__version__ = "0.1.0"

__all__ = [
    # Engine
    "cn",
    "merge",
    "effective_tokens",
    "define_variants",
    "resolve",
    "CompoundRule",
    "ResolvedStyle",
    "VariantSchema",
    "CascadeScope",
    "CascadeStore",
    # Elements
    "ElementAdapter",
    "ElementSpec",
    "Ref",
    "RenderContext",
    "mount",
    "create_render_context",
    # Rendering
    "MarkupRenderer",
    "render_html",
    # Errors
    "ConfigurationError",
    "InvalidVariantValue",
    "KitRulesError",
    "MissingAxisResolution",
]
