"""
Variants component - Declarative variant schemas and their resolver.

Precedence: explicit value > schema default. Inherited cascade values are
merged in by the element adapter before resolution.
"""

from .component import (
    define_variants,
    normalize_value,
    resolve,
    resolve_axes,
)
from .models import CompoundRule, ResolvedStyle, VariantSchema

__all__ = [
    # Entry points
    "define_variants",
    "resolve",
    "resolve_axes",
    "normalize_value",
    # Models
    "CompoundRule",
    "ResolvedStyle",
    "VariantSchema",
]
