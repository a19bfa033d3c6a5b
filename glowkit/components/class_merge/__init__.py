"""
Class merge component - Ordered token list merging.

Concatenates token lists in call order. Conflicts are left to the rendering
environment, which applies the last occurrence of a visual property.
"""

from .component import cn, effective_tokens, merge, split_tokens

__all__ = [
    "cn",
    "effective_tokens",
    "merge",
    "split_tokens",
]
