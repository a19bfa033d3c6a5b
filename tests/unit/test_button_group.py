"""
Button group tests.

The group establishes size for its items and assigns their positions.
"""

from __future__ import annotations

import logging
from functools import partial

import pytest

from glowkit.components.adapter import RenderContext
from glowkit.domain.entities import Node
from glowkit.ui.components import button_group, button_group_item, get_position


def _items(*labels: str, **keywords: object) -> list[partial[Node]]:
    return [partial(button_group_item, label, **keywords) for label in labels]


class TestGetPosition:
    """Position helper."""

    def test_single(self) -> None:
        assert get_position(0, 1) == "only"

    def test_ends_and_middle(self) -> None:
        assert [get_position(i, 4) for i in range(4)] == ["first", "middle", "middle", "last"]


class TestButtonGroupItem:
    """Standalone items."""

    def test_defaults(self, ctx: RenderContext) -> None:
        node = button_group_item(ctx, "Day")
        assert node.tag == "button"
        assert node.text() == "Day"
        assert "h-10" in node.tokens
        assert "hover:border-border-hover" in node.tokens
        assert node.attributes["aria-pressed"] is None

    def test_selected(self, ctx: RenderContext) -> None:
        node = button_group_item(ctx, "Day", selected=True)
        assert "bg-fill-tertiary" in node.tokens
        assert "hover:border-border-hover" not in node.tokens
        assert node.attributes["aria-pressed"] == "true"

    def test_explicitly_unselected(self, ctx: RenderContext) -> None:
        assert button_group_item(ctx, "Day", selected=False).attributes["aria-pressed"] == "false"

    def test_icons_around_label(self, ctx: RenderContext) -> None:
        node = button_group_item(ctx, "Grid", left_icon="grid", right_icon="caret", size="lg")
        glyphs = [svg.attributes["data-glyph"] for svg in node.find_all("svg")]
        assert glyphs == ["grid", "caret"]
        assert node.find_all("svg")[0].attributes["width"] == 24
        assert "aspect-square" not in node.tokens

    def test_icon_only(self, ctx: RenderContext, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            node = button_group_item(ctx, left_icon="grid", **{"aria-label": "Grid view"})
        assert node.tokens[-2:] == ("aspect-square", "px-0")
        assert caplog.text == ""

    def test_icon_only_without_label_warns(
        self, ctx: RenderContext, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            button_group_item(ctx, left_icon="grid")
        assert "aria-label" in caplog.text

    def test_disabled(self, ctx: RenderContext) -> None:
        node = button_group_item(ctx, "Day", disabled=True)
        assert node.attributes["disabled"] is True
        assert node.attributes["aria-disabled"] is True


class TestButtonGroup:
    """Grouped items."""

    def test_group_root(self, ctx: RenderContext) -> None:
        node = button_group(ctx, _items("A", "B"))
        assert node.tag == "div"
        assert node.tokens == ("isolate", "inline-flex")
        assert node.attributes["role"] == "group"
        assert node.attributes["aria-orientation"] == "horizontal"

    def test_positions(self, ctx: RenderContext) -> None:
        first, middle, last = button_group(ctx, _items("Day", "Week", "Month")).children
        assert isinstance(first, Node) and isinstance(middle, Node) and isinstance(last, Node)
        assert "rounded-l-sm" in first.tokens
        assert not any(token.startswith("rounded") for token in middle.tokens)
        assert "rounded-r-sm" in last.tokens

    def test_single_item(self, ctx: RenderContext) -> None:
        (only,) = button_group(ctx, _items("Only")).children
        assert isinstance(only, Node)
        assert "rounded-sm" in only.tokens

    def test_overlap_after_first(self, ctx: RenderContext) -> None:
        first, second = button_group(ctx, _items("A", "B")).children
        assert isinstance(first, Node) and isinstance(second, Node)
        assert "-ml-px" not in first.tokens
        assert "-ml-px" in second.tokens

    def test_group_size_reaches_items(self, ctx: RenderContext) -> None:
        node = button_group(ctx, _items("A", "B"), size="sm")
        assert all("h-8" in button.tokens for button in node.find_all("button"))

    def test_item_size_wins(self, ctx: RenderContext) -> None:
        items = [partial(button_group_item, "A"), partial(button_group_item, "B", size="lg")]
        first, second = button_group(ctx, items, size="sm").children
        assert isinstance(first, Node) and isinstance(second, Node)
        assert "h-8" in first.tokens
        assert "h-12" in second.tokens

    def test_without_group_size_items_use_default(self, ctx: RenderContext) -> None:
        node = button_group(ctx, _items("A"))
        assert "h-10" in node.find_all("button")[0].tokens

    def test_size_does_not_leak_to_siblings(self, ctx: RenderContext) -> None:
        button_group(ctx, _items("A"), size="sm")
        assert "h-10" in button_group_item(ctx, "B").tokens

    def test_fill_width(self, ctx: RenderContext) -> None:
        node = button_group(ctx, _items("A", "B"), hug=False)
        assert "w-full" in node.tokens
        assert all("flex-1" in button.tokens for button in node.find_all("button"))

    def test_item_override_tokens_kept(self, ctx: RenderContext) -> None:
        items = [partial(button_group_item, "A"), partial(button_group_item, "B", class_name="x")]
        _, second = button_group(ctx, items).children
        assert isinstance(second, Node)
        assert second.tokens[-2:] == ("-ml-px", "x")

    def test_invalid_children_skipped(
        self, ctx: RenderContext, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            node = button_group(ctx, ["oops", partial(button_group_item, "A")])
        assert "found 1 invalid" in caplog.text
        (only,) = node.children
        assert isinstance(only, Node)
        assert "rounded-sm" in only.tokens

    def test_toolbar_role_and_orientation(self, ctx: RenderContext) -> None:
        node = button_group(ctx, _items("A"), role="toolbar", orientation="vertical")
        assert node.attributes["role"] == "toolbar"
        assert node.attributes["aria-orientation"] == "vertical"
