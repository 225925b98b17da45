"""Tests for ncds_html.mappers.inference."""

import pytest

from ncds_html.mappers.inference import (
    extract_dropdown_items,
    extract_tab_items,
    find_child_text,
    infer_badge_color,
    infer_button_theme,
    infer_flag,
    infer_icon_color,
    infer_notification_type,
    infer_orientation,
    infer_size,
    infer_tag_color,
)
from ncds_html.models import NodeType


# ---------------------------------------------------------------------------
# Size
# ---------------------------------------------------------------------------


class TestInferSize:

    @pytest.mark.parametrize("name,expected", [
        ("Icon Tiny", "xxs"),
        ("Button xxs", "xxs"),
        ("Button Small", "xs"),
        ("Button sm", "sm"),
        ("Button Large", "lg"),
        ("Heading 2xl", "2xl"),
        ("Heading xl", "xl"),
        ("Button", "md"),
        ("", "md"),
    ])
    def test_size_tokens(self, make_node, name, expected):
        assert infer_size(make_node(name)) == expected

    def test_2xl_not_read_as_xl(self, make_node):
        assert infer_size(make_node("Title 2xl")) == "2xl"

    def test_xlarge_resolves_to_lg_by_order(self, make_node):
        # "xlarge" contains "large", which is checked first
        assert infer_size(make_node("Panel XLarge")) == "lg"

    def test_no_layout_still_infers(self, make_node):
        node = make_node("Button Large")
        assert node.layout is None
        assert infer_size(node) == "lg"


# ---------------------------------------------------------------------------
# Colors / themes
# ---------------------------------------------------------------------------


class TestInferColors:

    @pytest.mark.parametrize("name,expected", [
        ("Primary Button", "primary"),
        ("Secondary Button", "secondary"),
        ("Delete Button", "destructive"),
        ("Danger Button", "destructive"),
        ("Link Button", "link"),
        ("Tertiary Button", "tertiary"),
        ("Gray Button", "secondary-gray"),
        ("Button", "primary"),
    ])
    def test_button_theme(self, make_node, name, expected):
        assert infer_button_theme(make_node(name)) == expected

    def test_badge_color(self, make_node):
        assert infer_badge_color(make_node("Badge Green")) == "success"
        assert infer_badge_color(make_node("Badge Warning")) == "warning"
        assert infer_badge_color(make_node("Badge Red")) == "error"
        assert infer_badge_color(make_node("Badge Blue")) == "info"
        assert infer_badge_color(make_node("Badge")) == "default"

    def test_tag_color_defaults_to_gray(self, make_node):
        assert infer_tag_color(make_node("Tag")) == "gray"
        assert infer_tag_color(make_node("Tag Primary")) == "primary"
        assert infer_tag_color(make_node("Tag Success")) == "success"

    def test_icon_color(self, make_node):
        assert infer_icon_color(make_node("Icon Red")) == "primary"
        assert infer_icon_color(make_node("Icon Danger")) == "error"
        assert infer_icon_color(make_node("Icon")) == "gray"

    def test_notification_type(self, make_node):
        assert infer_notification_type(make_node("Alert Success")) == "success"
        assert infer_notification_type(make_node("Toast Danger")) == "error"
        assert infer_notification_type(make_node("Alert")) == "info"


# ---------------------------------------------------------------------------
# Flags / orientation
# ---------------------------------------------------------------------------


class TestFlagsAndOrientation:

    def test_flag_is_case_insensitive(self, make_node):
        node = make_node("Input DISABLED Required")
        assert infer_flag(node, "disabled") is True
        assert infer_flag(node, "required") is True
        assert infer_flag(node, "checked") is False

    def test_orientation_from_layout(self, make_node):
        assert infer_orientation(make_node("Divider", width=300, height=1)) == "horizontal"
        assert infer_orientation(make_node("Divider", width=1, height=300)) == "vertical"
        assert infer_orientation(make_node("Divider", width=10, height=10)) == "vertical"

    def test_orientation_without_layout(self, make_node):
        assert infer_orientation(make_node("Divider")) == "vertical"


# ---------------------------------------------------------------------------
# Child-derived items
# ---------------------------------------------------------------------------


class TestChildExtraction:

    def test_find_child_text(self, make_node):
        node = make_node("Modal", children=[
            make_node("Header Title", type=NodeType.TEXT, text="Delete item?"),
            make_node("Description", type=NodeType.TEXT, text="Cannot undo"),
        ])
        assert find_child_text(node, "title") == "Delete item?"
        assert find_child_text(node, "description") == "Cannot undo"
        assert find_child_text(node, "footer") is None

    def test_find_child_text_skips_textless_match(self, make_node):
        node = make_node("Modal", children=[
            make_node("Title Frame"),
            make_node("Title", type=NodeType.TEXT, text="Real title"),
        ])
        assert find_child_text(node, "title") == "Real title"

    def test_find_child_text_no_children(self, make_node):
        assert find_child_text(make_node("Modal"), "title") is None

    def test_tab_items(self, make_node):
        node = make_node("Tab Group", children=[
            make_node("Tab 1", type=NodeType.TEXT, text="One"),
            make_node("Tab 2 Active", type=NodeType.TEXT, text="Two"),
            make_node("Spacer", type=NodeType.RECTANGLE),
            make_node("Tab 3", type=NodeType.TEXT, text="Three"),
        ])
        items = extract_tab_items(node)
        assert [i["label"] for i in items] == ["One", "Two", "Three"]
        assert [i["is_active"] for i in items] == [False, True, False]

    def test_tab_items_text_node_without_text_uses_name(self, make_node):
        node = make_node("Tabs", children=[make_node("Overview", type=NodeType.TEXT)])
        assert extract_tab_items(node) == [{"label": "Overview", "is_active": False}]

    def test_dropdown_items_positions(self, make_node):
        node = make_node("Dropdown", children=[
            make_node("a", type=NodeType.TEXT, text="Edit"),
            make_node("icon", type=NodeType.ELLIPSE),
            make_node("b", type=NodeType.TEXT, text="Remove"),
        ])
        assert extract_dropdown_items(node) == [
            {"label": "Edit", "value": "1"},
            {"label": "Remove", "value": "2"},
        ]

    def test_dropdown_items_default(self, make_node):
        items = extract_dropdown_items(make_node("Dropdown"))
        assert items == [
            {"label": "옵션 1", "value": "1"},
            {"label": "옵션 2", "value": "2"},
        ]

    def test_dropdown_default_is_a_fresh_copy(self, make_node):
        first = extract_dropdown_items(make_node("Dropdown"))
        first[0]["label"] = "changed"
        assert extract_dropdown_items(make_node("Dropdown"))[0]["label"] == "옵션 1"
