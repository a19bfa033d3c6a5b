from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from glowkit.domain.entities import Node


class PrimitivePort(Protocol):
    def element(
        self,
        tag: str,
        class_name: str,
        attributes: Mapping[str, Any],
        children: Sequence[Node | str],
    ) -> Node:
        """Create a root node with the given class string and attributes."""
        ...


class GlyphPort(Protocol):
    def draw(
        self,
        glyph: str,
        *,
        size: int,
        weight: str,
        class_name: str,
        attributes: Mapping[str, Any],
    ) -> Node:
        """Render a glyph at a pixel size. Colour arrives as a class token."""
        ...


class TextPort(Protocol):
    def write(
        self,
        tag: str,
        content: Sequence[Node | str],
        *,
        class_name: str,
        attributes: Mapping[str, Any],
    ) -> Node:
        """Render text content. Colour arrives as a class token."""
        ...
