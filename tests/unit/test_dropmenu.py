"""
Dropmenu tests.

The dropmenu size flows to content, options, header and footer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

from glowkit.adapters import render_html
from glowkit.components.adapter import RenderContext, mount
from glowkit.domain.entities import LifecycleState, Node
from glowkit.ui.components import (
    button_group_item,
    checkbox,
    dropmenu,
    dropmenu_content,
    dropmenu_divider,
    dropmenu_footer,
    dropmenu_header,
    dropmenu_option,
)


def _menu(ctx: RenderContext, **props: object) -> Node:
    return dropmenu(
        ctx,
        lambda c: dropmenu_content(
            c,
            [
                lambda cc: dropmenu_header(cc, "Account"),
                lambda cc: dropmenu_option(cc, "Profile", left_icon="user", right_text="P"),
                lambda cc: dropmenu_divider(cc),
                lambda cc: dropmenu_footer(cc, "Signed in"),
            ],
        ),
        **props,
    )


def _by_role(node: Node, role: str) -> list[Node]:
    found = [node] if node.attributes.get("role") == role else []
    for child in node.children:
        if isinstance(child, Node):
            found.extend(_by_role(child, role))
    return found


class TestDropmenuCascade:
    """Size inheritance."""

    def test_small_menu(self, ctx: RenderContext) -> None:
        menu = _menu(ctx, size="sm")
        (content,) = _by_role(menu, "menu")
        (option,) = _by_role(menu, "menuitem")
        assert "w-[220px]" in content.tokens
        assert "py-1.5" in option.tokens
        (svg,) = option.find_all("svg")
        assert svg.attributes["width"] == 16

    def test_header_and_footer_follow(self, ctx: RenderContext) -> None:
        menu = _menu(ctx, size="sm")
        header = content_child(menu, 0)
        footer = content_child(menu, 3)
        assert "text-xs" in header.tokens
        assert "px-3" in footer.tokens
        (note,) = footer.find_all("span")
        assert "text-xs" in note.tokens

    def test_default_menu_is_large(self, ctx: RenderContext) -> None:
        menu = _menu(ctx)
        (content,) = _by_role(menu, "menu")
        assert "w-[260px]" in content.tokens

    def test_medium_menu(self, ctx: RenderContext) -> None:
        (option,) = _by_role(_menu(ctx, size="md"), "menuitem")
        assert "py-2.5" in option.tokens
        (svg,) = option.find_all("svg")
        assert svg.attributes["width"] == 16

    def test_explicit_size_wins(self, ctx: RenderContext) -> None:
        menu = dropmenu(ctx, lambda c: dropmenu_option(c, "Big", size="lg"), size="sm")
        (option,) = _by_role(menu, "menuitem")
        assert "py-3" in option.tokens

    def test_outside_menu_falls_back_to_large(self, ctx: RenderContext) -> None:
        assert "py-3" in dropmenu_option(ctx, "Solo").tokens
        assert "w-[260px]" in dropmenu_content(ctx).tokens

    def test_scope_does_not_leak(self, ctx: RenderContext) -> None:
        _menu(ctx, size="sm")
        assert "w-[260px]" in dropmenu_content(ctx).tokens


    def test_other_families_ignore_menu_size(self, ctx: RenderContext) -> None:
        menu = dropmenu(
            ctx,
            [lambda c: checkbox(c), lambda c: button_group_item(c, "Day")],
            size="sm",
        )
        box, item = menu.find_all("button")
        assert "size-5" in box.tokens
        assert "h-10" in item.tokens


class TestDropmenuDiagnostics:
    """Parts used outside a Dropmenu."""

    @pytest.mark.parametrize(
        ("build", "name"),
        [
            (lambda c: dropmenu_content(c), "DropmenuContent"),
            (lambda c: dropmenu_option(c, "Solo"), "DropmenuOption"),
            (lambda c: dropmenu_header(c, "Title"), "DropmenuHeader"),
            (lambda c: dropmenu_footer(c, "Note"), "DropmenuFooter"),
        ],
    )
    def test_part_outside_menu_warns(
        self,
        ctx: RenderContext,
        caplog: pytest.LogCaptureFixture,
        build: Callable[[RenderContext], Node],
        name: str,
    ) -> None:
        with caplog.at_level(logging.WARNING):
            build(ctx)
        assert f"{name} must be used within a Dropmenu" in caplog.text

    def test_part_inside_menu_is_quiet(
        self, ctx: RenderContext, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            _menu(ctx, size="sm")
        assert caplog.text == ""

    def test_warning_can_be_disabled(
        self, quiet_ctx: RenderContext, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            dropmenu_option(quiet_ctx, "Solo")
        assert caplog.text == ""


class TestDropmenuParts:
    """Individual parts."""

    def test_option_right_text(self, ctx: RenderContext) -> None:
        option = dropmenu_option(ctx, "Copy", right_text="C")
        (shortcut,) = [node for node in option.find_all("span") if "ml-auto" in node.tokens]
        assert shortcut.text() == "C"
        assert "text-text-secondary" in shortcut.tokens

    def test_add_ons_replace_icon_and_text(self, ctx: RenderContext) -> None:
        option = dropmenu_option(
            ctx,
            "Jane",
            left_icon="user",
            left_add_on=Node("img", {"alt": ""}),
            right_text="ignored",
            right_add_on=Node("kbd", {}, ["J"]),
        )
        assert option.find_all("svg") == []
        assert len(option.find_all("img")) == 1
        assert "ignored" not in option.text()
        assert option.text().endswith("J")

    def test_disabled_option(self, ctx: RenderContext) -> None:
        option = dropmenu_option(ctx, "Delete", disabled=True)
        assert option.attributes["aria-disabled"] is True
        assert "pointer-events-none" in option.tokens
        (label,) = option.find_all("span")
        assert "text-text-tertiary" in label.tokens

    def test_divider_html(self, ctx: RenderContext) -> None:
        assert render_html(dropmenu_divider(ctx)) == (
            '<div class="w-full bg-background py-0.5" role="separator">'
            '<div class="h-px w-full bg-fill-tertiary"></div></div>'
        )

    def test_content_attributes(self, ctx: RenderContext) -> None:
        content = dropmenu_content(ctx)
        assert content.attributes["aria-orientation"] == "vertical"


class TestDropmenuLifecycle:
    """Mount and unmount."""

    def test_unmount_releases_every_render(self, ctx: RenderContext) -> None:
        tree = mount(ctx, lambda c: _menu(c, size="md"))
        renders = tree.render_pass.renders
        assert renders[0].spec.name == "Dropmenu"
        assert all(r.state is LifecycleState.FORWARDED for r in renders)
        tree.unmount()
        assert all(r.state is LifecycleState.UNMOUNTED for r in renders)


def content_child(menu: Node, index: int) -> Node:
    (content,) = _by_role(menu, "menu")
    child = content.children[index]
    assert isinstance(child, Node)
    return child
