"""Rule-based mapping of design nodes onto NCDS UI Admin components.

The rule table is an ordered list of (condition, mapper) pairs. A node is
tested against each condition in list order and the first match decides
the component; no further rules are tried. Order is a behavioral
contract, e.g. "select" is tested before "dropdown", so a layer named
"Select Dropdown" becomes a Select.

Some rules are shadowed by earlier ones (vertical_tab behind tab, tag
behind badge, dropdown behind select) and only fire for names the earlier
rule rejects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from ncds_html import settings
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
    lower_name,
    name_has,
)
from ncds_html.models import ComponentKind, ComponentMapping, DesignNode, NodeType

logger = logging.getLogger("ncds_html.mappers")

Condition = Callable[[DesignNode], bool]
Mapper = Callable[[DesignNode], ComponentMapping]


@dataclass(frozen=True)
class ComponentRule:
    """One entry of the rule table."""
    name: str
    condition: Condition
    mapper: Mapper


def _is(node: DesignNode, *types: NodeType) -> bool:
    return node.type in types


def _label(node: DesignNode) -> str:
    return node.text or node.name


def _mapping(kind: ComponentKind, props: dict, html_tag: str, class_name: str) -> ComponentMapping:
    return ComponentMapping(
        component=kind.value, props=props, html_tag=html_tag, class_name=class_name,
    )


# =====================================================================
# Conditions
# =====================================================================


def _button_condition(instance_as_button: bool) -> Condition:
    def condition(node: DesignNode) -> bool:
        if instance_as_button and node.type == NodeType.INSTANCE:
            return True
        return _is(node, NodeType.FRAME) and name_has(node, "button", "btn", "click", "submit")
    return condition


def _is_input(node: DesignNode) -> bool:
    name = lower_name(node)
    return _is(node, NodeType.FRAME) and (
        "input" in name or "field" in name or ("text" in name and "label" not in name)
    )


def _is_tab(node: DesignNode) -> bool:
    name = lower_name(node)
    return _is(node, NodeType.FRAME) and "tab" in name and "table" not in name


def _is_progress_bar(node: DesignNode) -> bool:
    return _is(node, NodeType.FRAME) and name_has(node, "progress") and name_has(node, "bar")


def _is_vertical_tab(node: DesignNode) -> bool:
    return _is(node, NodeType.FRAME) and name_has(node, "vertical") and name_has(node, "tab")


def _is_progress_circle(node: DesignNode) -> bool:
    return (
        _is(node, NodeType.FRAME)
        and name_has(node, "progress")
        and name_has(node, "circle", "circular")
    )


def _is_tag(node: DesignNode) -> bool:
    name = lower_name(node)
    return _is(node, NodeType.FRAME, NodeType.TEXT) and "tag" in name and "stage" not in name


def _is_dropdown(node: DesignNode) -> bool:
    name = lower_name(node)
    return _is(node, NodeType.FRAME) and "dropdown" in name and "select" not in name


def _frame_named(*terms: str) -> Condition:
    def condition(node: DesignNode) -> bool:
        return _is(node, NodeType.FRAME) and name_has(node, *terms)
    return condition


def _typed_named(types: Sequence[NodeType], *terms: str) -> Condition:
    def condition(node: DesignNode) -> bool:
        return _is(node, *types) and name_has(node, *terms)
    return condition


# =====================================================================
# Mappers
# =====================================================================


def _map_button(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.BUTTON, {
        "label": _label(node),
        "hierarchy": infer_button_theme(node),
        "size": infer_size(node),
        "disabled": infer_flag(node, "disabled"),
    }, "button", "ncua-btn")


def _map_input(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.INPUT_BASE, {
        "placeholder": node.text or "Enter text...",
        "size": infer_size(node),
        "disabled": infer_flag(node, "disabled"),
        "required": infer_flag(node, "required"),
    }, "input", "ncua-input")


def _map_checkbox(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.CHECKBOX, {
        "label": _label(node),
        "checked": infer_flag(node, "checked"),
        "disabled": infer_flag(node, "disabled"),
    }, "label", "ncua-checkbox")


def _map_radio(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.RADIO, {
        "label": _label(node),
        "checked": infer_flag(node, "selected"),
        "disabled": infer_flag(node, "disabled"),
    }, "label", "ncua-radio")


def _map_select(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.SELECT, {
        "placeholder": node.text or "Select an option",
        "size": infer_size(node),
        "disabled": infer_flag(node, "disabled"),
    }, "select", "ncua-select")


def _map_badge(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.BADGE, {
        "label": _label(node),
        "color": infer_badge_color(node),
        "size": infer_size(node),
    }, "span", "ncua-badge")


def _map_modal(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.MODAL, {
        "is_open": True,
        "title": find_child_text(node, "title") or "Modal Title",
    }, "div", "ncua-modal")


def _map_tab(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.HORIZONTAL_TAB, {
        "tabs": extract_tab_items(node),
    }, "div", "ncua-tab")


def _map_pagination(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.PAGINATION, {
        "current_page": 1,
        "total_pages": 10,
        "size": infer_size(node),
    }, "nav", "ncua-pagination")


def _map_progress_bar(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.PROGRESS_BAR, {
        "progress": 50,
        "size": infer_size(node),
    }, "div", "ncua-progress-bar")


def _map_notification(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.NOTIFICATION, {
        "title": find_child_text(node, "title") or "Notification",
        "description": find_child_text(node, "description") or node.text,
        "type": infer_notification_type(node),
    }, "div", "ncua-notification")


def _map_vertical_tab(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.VERTICAL_TAB, {
        "tabs": extract_tab_items(node),
        "type": "button-primary",
    }, "div", "ncua-vertical-tab")


def _map_progress_circle(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.PROGRESS_CIRCLE, {
        "progress": 50,
        "size": infer_size(node),
    }, "div", "ncua-progress-circle")


def _map_spinner(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.SPINNER, {
        "size": infer_size(node),
        "text": node.text,
    }, "div", "ncua-spinner")


def _map_tag(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.TAG, {
        "label": _label(node),
        "color": infer_tag_color(node),
        "size": infer_size(node),
    }, "span", "ncua-tag")


def _map_toggle(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.TOGGLE, {
        "checked": infer_flag(node, "on"),
        "disabled": infer_flag(node, "disabled"),
        "size": infer_size(node),
        "text": node.text,
    }, "label", "ncua-toggle")


def _map_tooltip(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.TOOLTIP, {
        "title": find_child_text(node, "title") or node.text,
        "position": "top",
    }, "span", "ncua-tooltip")


def _map_slider(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.SLIDER, {
        "value": 50,
        "min": 0,
        "max": 100,
        "size": infer_size(node),
    }, "div", "ncua-slider")


def _map_breadcrumb(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.BREADCRUMB, {
        "items": [{"label": "Home", "href": "/"}, {"label": "Current", "href": "#"}],
    }, "nav", "ncua-breadcrumb")


def _map_divider(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.DIVIDER, {
        "orientation": infer_orientation(node),
        "text": node.text,
    }, "hr", "ncua-divider")


def _map_dropdown(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.DROPDOWN, {
        "label": node.text or "Dropdown",
        "items": extract_dropdown_items(node),
    }, "div", "ncua-dropdown")


def _map_empty_state(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.EMPTY_STATE, {
        "title": find_child_text(node, "title") or "No Data",
        "description": find_child_text(node, "description") or node.text,
    }, "div", "ncua-empty-state")


def _map_featured_icon(node: DesignNode) -> ComponentMapping:
    return _mapping(ComponentKind.FEATURED_ICON, {
        "name": "star",
        "size": infer_size(node),
        "color": infer_icon_color(node),
        "theme": "light",
    }, "div", "ncua-featured-icon")


# =====================================================================
# Rule table
# =====================================================================


def build_component_rules(instance_as_button: Optional[bool] = None) -> List[ComponentRule]:
    """Build the ordered rule table.

    Args:
        instance_as_button: Map every INSTANCE node to Button regardless of
            name. Defaults to the NCDS_INSTANCE_AS_BUTTON setting.
    """
    if instance_as_button is None:
        instance_as_button = settings.NCDS_INSTANCE_AS_BUTTON

    return [
        ComponentRule("button", _button_condition(instance_as_button), _map_button),
        ComponentRule("input", _is_input, _map_input),
        ComponentRule("checkbox", _frame_named("checkbox", "check"), _map_checkbox),
        ComponentRule("radio", _frame_named("radio"), _map_radio),
        ComponentRule("select", _frame_named("select", "dropdown", "combo"), _map_select),
        ComponentRule(
            "badge", _typed_named((NodeType.FRAME, NodeType.TEXT), "badge", "tag", "chip"), _map_badge,
        ),
        ComponentRule("modal", _frame_named("modal", "dialog", "popup"), _map_modal),
        ComponentRule("tab", _is_tab, _map_tab),
        ComponentRule("pagination", _frame_named("pagination", "pager"), _map_pagination),
        ComponentRule("progress_bar", _is_progress_bar, _map_progress_bar),
        ComponentRule(
            "notification", _frame_named("notification", "alert", "toast"), _map_notification,
        ),
        ComponentRule("vertical_tab", _is_vertical_tab, _map_vertical_tab),
        ComponentRule("progress_circle", _is_progress_circle, _map_progress_circle),
        ComponentRule("spinner", _frame_named("spinner", "loading", "loader"), _map_spinner),
        ComponentRule("tag", _is_tag, _map_tag),
        ComponentRule("toggle", _frame_named("toggle", "switch"), _map_toggle),
        ComponentRule("tooltip", _frame_named("tooltip"), _map_tooltip),
        ComponentRule("slider", _frame_named("slider", "range"), _map_slider),
        ComponentRule("breadcrumb", _frame_named("breadcrumb", "bread"), _map_breadcrumb),
        ComponentRule(
            "divider",
            _typed_named((NodeType.FRAME, NodeType.LINE), "divider", "separator", "line"),
            _map_divider,
        ),
        ComponentRule("dropdown", _is_dropdown, _map_dropdown),
        ComponentRule(
            "empty_state", _frame_named("empty", "no-data", "no-result"), _map_empty_state,
        ),
        ComponentRule(
            "featured_icon",
            _typed_named((NodeType.FRAME, NodeType.COMPONENT), "icon", "featured"),
            _map_featured_icon,
        ),
    ]


NCDS_COMPONENT_RULES: List[ComponentRule] = build_component_rules()


def classify_node(
    node: DesignNode,
    rules: Optional[Sequence[ComponentRule]] = None,
) -> Optional[ComponentMapping]:
    """Return the mapping of the first rule whose condition matches, else None."""
    for rule in NCDS_COMPONENT_RULES if rules is None else rules:
        if rule.condition(node):
            mapping = rule.mapper(node)
            logger.debug(f"classify_node: node={node.id!r} rule={rule.name} -> {mapping.component}")
            return mapping
    return None
