"""Recursive NCDS HTML generation from a simplified design tree.

For every node, depth-first in document order:
1. Classify it with the rule table (mappers.ncds_component_mapper)
2. If the mapping validates, count it and render the widget template
3. Otherwise render generic structural markup (span/div/img + inline styles)

Usage accounting (which components were used, how often) lives in a
RenderContext created per generate_from_design() call, so a generator
instance holds no per-run state and can be reused or shared.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from html import escape
from typing import Dict, List, Optional, Sequence

from ncds_html import settings
from ncds_html.generators.stylesheet import build_ncds_css
from ncds_html.generators.templates import (
    TEMPLATE_REGISTRY,
    TemplateContext,
    render_generic_component,
)
from ncds_html.mappers.ncds_component_mapper import ComponentRule, classify_node
from ncds_html.mappers.validator import validate_ncds_mapping
from ncds_html.models import (
    ComponentMapping,
    DesignNode,
    GeneratedNcdsHtml,
    GlobalVars,
    NodeType,
    SimplifiedDesign,
)

logger = logging.getLogger("ncds_html.generators")

# Node type → generic HTML tag (anything else renders as div)
GENERIC_TAGS: Dict[NodeType, str] = {
    NodeType.TEXT: "span",
    NodeType.FRAME: "div",
    NodeType.GROUP: "div",
    NodeType.RECTANGLE: "div",
    NodeType.ELLIPSE: "div",
    NodeType.IMAGE: "img",
}

CONTAINER_CLASS = "figma-container"


@dataclass
class NcdsHtmlGenerationOptions:
    """Generation switches; defaults come from ncds_html.settings."""
    include_css: bool = field(default_factory=lambda: settings.NCDS_INCLUDE_CSS)
    include_comments: bool = field(default_factory=lambda: settings.NCDS_INCLUDE_COMMENTS)
    php_naming_convention: bool = field(default_factory=lambda: settings.NCDS_PHP_NAMING)
    generate_ncds_imports: bool = field(default_factory=lambda: settings.NCDS_GENERATE_IMPORTS)
    wrap_in_container: bool = field(default_factory=lambda: settings.NCDS_WRAP_IN_CONTAINER)


@dataclass
class RenderContext:
    """Per-call usage accounting."""
    component_usage: Dict[str, int] = field(default_factory=dict)

    def record(self, component: str) -> None:
        self.component_usage[component] = self.component_usage.get(component, 0) + 1

    @property
    def used_components(self) -> List[str]:
        # dict preserves first-use order
        return list(self.component_usage)


def to_php_naming(name: str) -> str:
    """'Primary Button (Large)' → 'primary_button_large'."""
    return re.sub(r"[^a-z0-9]+", "_", (name or "").lower()).strip("_")


def _format_radius(radius) -> str:
    if isinstance(radius, (int, float)):
        return f"{radius:g}px"
    return str(radius)


class NcdsHtmlGenerator:
    """Generate NCDS UI Admin HTML from a SimplifiedDesign.

    Args:
        global_vars: Shared style table of the design (passed through).
        options: Generation switches. Defaults to NcdsHtmlGenerationOptions().
        rules: Alternative classification rule table. Defaults to the
            module-level NCDS_COMPONENT_RULES.
    """

    def __init__(
        self,
        global_vars: Optional[GlobalVars] = None,
        options: Optional[NcdsHtmlGenerationOptions] = None,
        rules: Optional[Sequence[ComponentRule]] = None,
    ):
        self.global_vars = global_vars or GlobalVars()
        self.options = options or NcdsHtmlGenerationOptions()
        self.rules = rules

    def generate_from_design(self, design: SimplifiedDesign) -> GeneratedNcdsHtml:
        ctx = RenderContext()
        html = self._render_nodes(design.nodes, ctx)
        if self.options.wrap_in_container:
            html = self._wrap_in_container(html)

        imports = ctx.used_components if self.options.generate_ncds_imports else None
        css = build_ncds_css() if self.options.include_css else None

        logger.info(
            f"generate_from_design: design={design.name!r}, top_level_nodes={len(design.nodes)}, "
            f"components={sum(ctx.component_usage.values())}, kinds={len(ctx.component_usage)}"
        )
        return GeneratedNcdsHtml(
            html=html,
            css=css,
            imports=imports,
            component_usage=dict(ctx.component_usage),
        )

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _render_nodes(self, nodes: Sequence[DesignNode], ctx: RenderContext) -> str:
        fragments = (self._render_node(node, ctx) for node in nodes)
        return "\n".join(f for f in fragments if f.strip())

    def _render_children(self, node: DesignNode, ctx: RenderContext) -> str:
        if not node.children:
            return ""
        return self._render_nodes(node.children, ctx)

    def _render_node(self, node: DesignNode, ctx: RenderContext) -> str:
        mapping = classify_node(node, self.rules)
        if mapping is not None:
            if validate_ncds_mapping(mapping):
                return self._render_component(mapping, node, ctx)
            logger.debug(
                f"_render_node: rejected mapping component={mapping.component!r} "
                f"for node={node.id!r}, falling back to generic markup"
            )
        return self._render_generic(node, ctx)

    # ------------------------------------------------------------------
    # Component rendering
    # ------------------------------------------------------------------

    def _render_component(
        self, mapping: ComponentMapping, node: DesignNode, ctx: RenderContext,
    ) -> str:
        ctx.record(mapping.component)

        template = TEMPLATE_REGISTRY.get(mapping.component)
        # Children are always rendered so nested widgets are counted;
        # each template decides whether to embed children_html.
        template_ctx = TemplateContext(
            element_id=self._element_id(node),
            class_name=self._component_class_name(mapping),
            props=mapping.props,
            children_html=self._render_children(node, ctx),
            node=node,
        )

        html = ""
        if self.options.include_comments:
            html += f"<!-- NCDS {mapping.component}: {self._comment_safe(node.name)} -->\n"
        if template is None:
            html += render_generic_component(mapping, template_ctx)
        else:
            html += template(template_ctx)
        return html

    @staticmethod
    def _component_class_name(mapping: ComponentMapping) -> str:
        base = mapping.class_name
        size = mapping.props.get("size")
        hierarchy = mapping.props.get("hierarchy")
        classes = [
            base,
            f"{base}--{size}" if size else "",
            f"{base}--{hierarchy}" if hierarchy else "",
        ]
        return " ".join(c for c in classes if c)

    # ------------------------------------------------------------------
    # Generic rendering
    # ------------------------------------------------------------------

    def _render_generic(self, node: DesignNode, ctx: RenderContext) -> str:
        tag = GENERIC_TAGS.get(node.type, "div")
        element_id = self._element_id(node)
        styles = self._inline_styles(node)

        attributes = " ".join(a for a in (
            f'id="{escape(element_id)}"' if element_id else "",
            f'class="figma-{node.type.value.lower()}"',
            f'style="{escape(styles)}"' if styles else "",
        ) if a)

        if tag == "img":
            # Void element; the layer name doubles as alt text
            return f'<img {attributes} alt="{escape(node.name)}" />'

        content = escape(node.text) if node.text else ""
        content += self._render_children(node, ctx)
        return f"<{tag} {attributes}>{content}</{tag}>"

    @staticmethod
    def _inline_styles(node: DesignNode) -> str:
        styles = []
        if node.opacity is not None and node.opacity != 1:
            styles.append(f"opacity: {node.opacity:g}")
        if node.border_radius:
            styles.append(f"border-radius: {_format_radius(node.border_radius)}")
        return "; ".join(styles)

    # ------------------------------------------------------------------
    # Naming / wrapping
    # ------------------------------------------------------------------

    def _element_id(self, node: DesignNode) -> str:
        if self.options.php_naming_convention:
            return to_php_naming(node.name)
        return node.id

    @staticmethod
    def _comment_safe(text: str) -> str:
        return (text or "").replace("--", "- -")

    @staticmethod
    def _wrap_in_container(html: str) -> str:
        return f'<div class="{CONTAINER_CLASS}">\n{html}\n</div>'
