from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, Union

# --- Enums / Literals ---
AxisValue = Union[str, bool]
Size = Literal["sm", "md", "lg"]
IconSize = Literal["xs", "sm", "md", "lg", "xl"]
Position = Literal["first", "middle", "last", "only"]

# A single token string, several space separated tokens, a nested iterable
# of those, or a falsy placeholder that contributes nothing.
TokenInput = Union[str, Iterable[Any], None, bool]


class LifecycleState(str, Enum):
    UNINITIALIZED = "uninitialized"
    CONFIGURED = "configured"
    STYLED = "styled"
    FORWARDED = "forwarded"
    UNMOUNTED = "unmounted"


# --- Rendered output ---


@dataclass
class Node:
    """A node produced by a rendering primitive."""

    tag: str
    attributes: dict[str, Any] = field(default_factory=dict)
    children: list[Node | str] = field(default_factory=list)

    @property
    def class_name(self) -> str:
        value = self.attributes.get("class", "")
        return value if isinstance(value, str) else ""

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(self.class_name.split())

    def find_all(self, tag: str) -> list[Node]:
        """Return every descendant (and self) with the given tag, depth first."""
        found: list[Node] = [self] if self.tag == tag else []
        for child in self.children:
            if isinstance(child, Node):
                found.extend(child.find_all(tag))
        return found

    def text(self) -> str:
        parts: list[str] = []
        for child in self.children:
            parts.append(child.text() if isinstance(child, Node) else child)
        return "".join(parts)
