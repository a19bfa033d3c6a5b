"""Default adapters for the rendering ports."""

from .markup import MarkupRenderer, render_html

__all__ = ["MarkupRenderer", "render_html"]
