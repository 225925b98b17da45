"""Raw Figma API response → SimplifiedDesign converter.

Reduces the Figma REST node tree to the fields the NCDS generator reads
(id, name, type, text, layout box, opacity, corner radius, children) and
collects referenced styles into the GlobalVars table.

Accepted inputs:
- GET /v1/files/:key          → {"name", "document", "styles"}
- GET /v1/files/:key/nodes    → {"name", "nodes": {id: {"document", "styles"}}}
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ncds_html.models import DesignNode, GlobalVars, LayoutBox, NodeType, SimplifiedDesign

logger = logging.getLogger("ncds_html.integrations.figma")

# Figma types that map 1:1 onto NodeType
_DIRECT_TYPES = {
    "TEXT": NodeType.TEXT,
    "FRAME": NodeType.FRAME,
    "GROUP": NodeType.GROUP,
    "RECTANGLE": NodeType.RECTANGLE,
    "ELLIPSE": NodeType.ELLIPSE,
    "INSTANCE": NodeType.INSTANCE,
    "COMPONENT": NodeType.COMPONENT,
    "COMPONENT_SET": NodeType.FRAME,
    "SECTION": NodeType.FRAME,
    "LINE": NodeType.LINE,
}

# Container types whose children are page content, not design nodes
_CONTAINER_TYPES = ("DOCUMENT", "CANVAS")


def simplify_raw_figma_response(
    raw: Dict[str, Any],
    max_depth: Optional[int] = None,
) -> SimplifiedDesign:
    """Simplify a Figma file or file-nodes response.

    Args:
        raw: Parsed JSON of GET /v1/files/:key or /v1/files/:key/nodes
        max_depth: Levels of design nodes to keep below each top-level node
            (1 = top-level nodes only). None keeps the full tree.

    Raises:
        ValueError: Response carries neither ``document`` nor ``nodes``.
    """
    styles_meta: Dict[str, Any] = {}
    documents: List[Dict[str, Any]] = []

    if "nodes" in raw:
        for node_id, entry in (raw.get("nodes") or {}).items():
            if not entry:
                logger.warning(f"simplify: node {node_id} missing from response")
                continue
            documents.append(entry.get("document") or {})
            styles_meta.update(entry.get("styles") or {})
    elif "document" in raw:
        documents.append(raw["document"])
        styles_meta.update(raw.get("styles") or {})
    else:
        raise ValueError("Figma response has neither 'document' nor 'nodes'")

    top_level: List[Dict[str, Any]] = []
    for document in documents:
        top_level.extend(_unwrap_containers(document))

    nodes = []
    referenced: Dict[str, Any] = {}
    for raw_node in top_level:
        node = _simplify_node(raw_node, 1, max_depth, styles_meta, referenced)
        if node is not None:
            nodes.append(node)

    logger.info(
        f"simplify: file={raw.get('name', '')!r}, top_level_nodes={len(nodes)}, "
        f"styles={len(referenced)}"
    )
    return SimplifiedDesign(
        name=raw.get("name", ""),
        nodes=nodes,
        global_vars=GlobalVars(styles=referenced),
    )


def _unwrap_containers(node: Dict[str, Any]) -> List[Dict[str, Any]]:
    """DOCUMENT → pages → frames; any other node is its own top level."""
    if node.get("type") not in _CONTAINER_TYPES:
        return [node]
    result: List[Dict[str, Any]] = []
    for child in node.get("children", []):
        result.extend(_unwrap_containers(child))
    return result


def _simplify_node(
    raw: Dict[str, Any],
    depth: int,
    max_depth: Optional[int],
    styles_meta: Dict[str, Any],
    referenced: Dict[str, Any],
) -> Optional[DesignNode]:
    if raw.get("visible", True) is False:
        return None

    for style_id in (raw.get("styles") or {}).values():
        if style_id not in referenced:
            meta = styles_meta.get(style_id) or {}
            referenced[style_id] = {
                "name": meta.get("name", ""),
                "styleType": meta.get("styleType", meta.get("style_type", "")),
            }

    children: List[DesignNode] = []
    if max_depth is None or depth < max_depth:
        for child in raw.get("children", []):
            simplified = _simplify_node(child, depth + 1, max_depth, styles_meta, referenced)
            if simplified is not None:
                children.append(simplified)

    opacity = raw.get("opacity")
    return DesignNode(
        id=raw.get("id", ""),
        name=raw.get("name", ""),
        type=figma_type_to_node_type(raw),
        text=raw.get("characters") or None,
        layout=_layout_box(raw),
        opacity=opacity if opacity is not None and opacity < 1 else None,
        border_radius=figma_corner_radius(raw),
        children=children or None,
    )


def figma_type_to_node_type(raw: Dict[str, Any]) -> NodeType:
    """Map a Figma node onto NodeType; shapes filled with an image become IMAGE."""
    figma_type = raw.get("type", "")
    if figma_type in ("RECTANGLE", "ELLIPSE", "FRAME") and _has_image_fill(raw):
        return NodeType.IMAGE
    return _DIRECT_TYPES.get(figma_type, NodeType.OTHER)


def _has_image_fill(raw: Dict[str, Any]) -> bool:
    return any(
        fill.get("type") == "IMAGE" and fill.get("visible", True)
        for fill in raw.get("fills") or []
    )


def _layout_box(raw: Dict[str, Any]) -> Optional[LayoutBox]:
    bbox = raw.get("absoluteBoundingBox")
    if not bbox:
        return None
    return LayoutBox(
        x=bbox.get("x"), y=bbox.get("y"),
        width=bbox.get("width"), height=bbox.get("height"),
    )


def figma_corner_radius(raw: Dict[str, Any]) -> Optional[str]:
    """CSS border-radius from cornerRadius / rectangleCornerRadii.

    Returns "8px" (uniform), "8px 8px 0px 0px" (per corner), or None.
    """
    radii = raw.get("rectangleCornerRadii")
    if radii and isinstance(radii, list) and len(radii) == 4:
        if len(set(radii)) == 1:
            return f"{radii[0]:g}px" if radii[0] > 0 else None
        return " ".join(f"{r:g}px" for r in radii)

    radius = raw.get("cornerRadius") or 0
    return f"{radius:g}px" if radius > 0 else None
