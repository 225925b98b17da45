"""Heuristic property inference for NCDS component mapping.

Pure functions over a DesignNode's name, text and immediate children.
Every function is total: absent optional fields fall back to the
documented default instead of raising.

Substring matching over author-controlled layer names is best-effort.
Overlapping tokens ("xlarge" contains "large", "on" inside "button")
resolve by check order, which is part of the contract.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from ncds_html.models import DesignNode, NodeType

# (tokens, value) checked in order; first match wins.
# 2xl precedes xl so "2xl" is not read as "xl".
SIZE_TOKENS: Sequence[Tuple[Tuple[str, ...], str]] = (
    (("xxs", "tiny"), "xxs"),
    (("xs", "small"), "xs"),
    (("sm",), "sm"),
    (("lg", "large"), "lg"),
    (("2xl", "xxlarge"), "2xl"),
    (("xl", "xlarge"), "xl"),
)
DEFAULT_SIZE = "md"

BUTTON_THEME_TOKENS: Sequence[Tuple[Tuple[str, ...], str]] = (
    (("primary",), "primary"),
    (("secondary",), "secondary"),
    (("destructive", "danger", "delete"), "destructive"),
    (("link",), "link"),
    (("tertiary",), "tertiary"),
    (("gray",), "secondary-gray"),
)

BADGE_COLOR_TOKENS: Sequence[Tuple[Tuple[str, ...], str]] = (
    (("success", "green"), "success"),
    (("warning", "yellow"), "warning"),
    (("error", "red"), "error"),
    (("info", "blue"), "info"),
)

TAG_COLOR_TOKENS: Sequence[Tuple[Tuple[str, ...], str]] = (
    *BADGE_COLOR_TOKENS,
    (("primary",), "primary"),
)

ICON_COLOR_TOKENS: Sequence[Tuple[Tuple[str, ...], str]] = (
    (("primary", "red"), "primary"),
    (("success", "green"), "success"),
    (("warning", "yellow"), "warning"),
    (("error", "danger"), "error"),
    (("info", "blue"), "info"),
)

NOTIFICATION_TYPE_TOKENS: Sequence[Tuple[Tuple[str, ...], str]] = (
    (("success",), "success"),
    (("warning",), "warning"),
    (("error", "danger"), "error"),
    (("info",), "info"),
)

DEFAULT_DROPDOWN_ITEMS: Tuple[Dict[str, str], ...] = (
    {"label": "옵션 1", "value": "1"},
    {"label": "옵션 2", "value": "2"},
)


def lower_name(node: DesignNode) -> str:
    return (node.name or "").lower()


def name_has(node: DesignNode, *terms: str) -> bool:
    """True if the lower-cased node name contains any of ``terms``."""
    name = lower_name(node)
    return any(term in name for term in terms)


def _first_token_match(
    node: DesignNode,
    table: Sequence[Tuple[Tuple[str, ...], str]],
    default: str,
) -> str:
    name = lower_name(node)
    for tokens, value in table:
        if any(token in name for token in tokens):
            return value
    return default


# =====================================================================
# Scalar inference
# =====================================================================


def infer_size(node: DesignNode) -> str:
    """Size token from the layer name: xxs/xs/sm/lg/2xl/xl, default md."""
    return _first_token_match(node, SIZE_TOKENS, DEFAULT_SIZE)


def infer_button_theme(node: DesignNode) -> str:
    return _first_token_match(node, BUTTON_THEME_TOKENS, "primary")


def infer_badge_color(node: DesignNode) -> str:
    return _first_token_match(node, BADGE_COLOR_TOKENS, "default")


def infer_tag_color(node: DesignNode) -> str:
    return _first_token_match(node, TAG_COLOR_TOKENS, "gray")


def infer_icon_color(node: DesignNode) -> str:
    return _first_token_match(node, ICON_COLOR_TOKENS, "gray")


def infer_notification_type(node: DesignNode) -> str:
    return _first_token_match(node, NOTIFICATION_TYPE_TOKENS, "info")


def infer_flag(node: DesignNode, token: str) -> bool:
    """Boolean state flag (disabled, required, checked, ...) from the name."""
    return token in lower_name(node)


def infer_orientation(node: DesignNode) -> str:
    """'horizontal' when the layout box is wider than tall, else 'vertical'."""
    layout = node.layout
    if layout is None or layout.width is None or layout.height is None:
        return "vertical"
    return "horizontal" if layout.width > layout.height else "vertical"


# =====================================================================
# Structured inference (immediate children)
# =====================================================================


def find_child_text(node: DesignNode, target: str) -> Optional[str]:
    """Text of the first immediate child whose name contains ``target``.

    Children without text are skipped. Returns None when nothing matches.
    """
    for child in node.children or []:
        if target in lower_name(child) and child.text:
            return child.text
    return None


def extract_tab_items(node: DesignNode) -> List[Dict[str, Any]]:
    """Tab items from text-bearing children, in order.

    Each item is ``{"label": ..., "is_active": bool}``; a child is active
    when its own name contains "active".
    """
    return [
        {
            "label": child.text or child.name,
            "is_active": infer_flag(child, "active"),
        }
        for child in node.children or []
        if child.type == NodeType.TEXT or child.text
    ]


def extract_dropdown_items(node: DesignNode) -> List[Dict[str, str]]:
    """Dropdown menu items from text-bearing children.

    ``value`` is the 1-based position among those children. Falls back to
    a fixed two-item list when no child carries text.
    """
    texts = [child.text for child in node.children or [] if child.text]
    if not texts:
        return [dict(item) for item in DEFAULT_DROPDOWN_ITEMS]
    return [
        {"label": text, "value": str(index)}
        for index, text in enumerate(texts, 1)
    ]
