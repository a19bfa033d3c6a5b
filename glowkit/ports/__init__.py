"""Port interfaces for the external rendering collaborators."""

from .primitives import GlyphPort, PrimitivePort, TextPort

__all__ = ["GlyphPort", "PrimitivePort", "TextPort"]
