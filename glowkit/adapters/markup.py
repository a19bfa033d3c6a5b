"""
Markup adapter - Builds Node trees and serialises them to HTML.

Implements PrimitivePort, GlyphPort and TextPort. Token strings are passed
through untouched; this adapter never interprets them.
"""

from __future__ import annotations

import html
from collections.abc import Mapping, Sequence
from typing import Any

from glowkit.domain.entities import Node

VOID_TAGS = frozenset({"br", "hr", "img", "input", "meta", "link"})


def _node_attributes(class_name: str, attributes: Mapping[str, Any]) -> dict[str, Any]:
    attrs: dict[str, Any] = {}
    if class_name:
        attrs["class"] = class_name
    attrs.update(attributes)
    return attrs


class MarkupRenderer:
    """Node-building implementation of all three rendering ports."""

    def element(
        self,
        tag: str,
        class_name: str,
        attributes: Mapping[str, Any],
        children: Sequence[Node | str],
    ) -> Node:
        return Node(
            tag=tag,
            attributes=_node_attributes(class_name, attributes),
            children=list(children),
        )

    def draw(
        self,
        glyph: str,
        *,
        size: int,
        weight: str,
        class_name: str,
        attributes: Mapping[str, Any],
    ) -> Node:
        attrs = {
            "width": size,
            "height": size,
            "viewBox": "0 0 256 256",
            "fill": "currentColor",
            "data-glyph": glyph,
            "data-weight": weight,
        }
        attrs.update(attributes)
        return Node(tag="svg", attributes=_node_attributes(class_name, attrs))

    def write(
        self,
        tag: str,
        content: Sequence[Node | str],
        *,
        class_name: str,
        attributes: Mapping[str, Any],
    ) -> Node:
        return Node(
            tag=tag,
            attributes=_node_attributes(class_name, attributes),
            children=list(content),
        )


def _render_attribute(name: str, value: Any) -> str | None:
    if value is None or value is False or callable(value):
        return None
    if value is True:
        return html.escape(name)
    return f'{html.escape(name)}="{html.escape(str(value), quote=True)}"'


def render_html(node: Node | str) -> str:
    """
    Serialise a node tree to HTML.

    - Text and attribute values are escaped.
    - None/False attributes and callables (event handlers) are dropped.
    - True renders as a bare attribute.
    """
    if isinstance(node, str):
        return html.escape(node)

    parts = [node.tag]
    for name, value in node.attributes.items():
        rendered = _render_attribute(name, value)
        if rendered is not None:
            parts.append(rendered)
    opening = "<" + " ".join(parts) + ">"

    if node.tag in VOID_TAGS and not node.children:
        return opening
    inner = "".join(render_html(child) for child in node.children)
    return f"{opening}{inner}</{node.tag}>"
