"""generate_ncds_html tool: Figma file → NCDS UI Admin HTML.

Fetches the design through FigmaClient, simplifies it, runs the
NcdsHtmlGenerator and formats the result as one text block. Failures are
reported as an error result (``isError``), never raised to the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from ncds_html import settings
from ncds_html.generators.ncds_html_generator import (
    NcdsHtmlGenerationOptions,
    NcdsHtmlGenerator,
)
from ncds_html.integrations.figma_client import FigmaClient
from ncds_html.models import GeneratedNcdsHtml

logger = logging.getLogger("ncds_html.tools")

NCDS_PACKAGE = "@ncds/ui-admin"


class GenerationOptionsParams(BaseModel):
    """Generation switches shared by the tool and the HTTP API."""

    include_css: bool = Field(
        default_factory=lambda: settings.NCDS_INCLUDE_CSS,
        description="Include NCDS CSS styles in the output",
    )
    include_comments: bool = Field(
        default_factory=lambda: settings.NCDS_INCLUDE_COMMENTS,
        description="Include HTML comments for debugging",
    )
    php_naming_convention: bool = Field(
        default_factory=lambda: settings.NCDS_PHP_NAMING,
        description="Use PHP-style naming conventions for element ids",
    )
    generate_ncds_imports: bool = Field(
        default_factory=lambda: settings.NCDS_GENERATE_IMPORTS,
        description="Generate list of NCDS components used",
    )
    wrap_in_container: bool = Field(
        default_factory=lambda: settings.NCDS_WRAP_IN_CONTAINER,
        description="Wrap the generated HTML in a container div",
    )
    output_format: Literal["html", "complete"] = Field(
        "complete",
        description="'html' for HTML only, 'complete' for HTML + CSS + imports",
    )

    def to_generation_options(self) -> NcdsHtmlGenerationOptions:
        return NcdsHtmlGenerationOptions(
            include_css=self.include_css,
            include_comments=self.include_comments,
            php_naming_convention=self.php_naming_convention,
            generate_ncds_imports=self.generate_ncds_imports,
            wrap_in_container=self.wrap_in_container,
        )


class GenerateNcdsHtmlParams(GenerationOptionsParams):
    """Arguments of the generate_ncds_html tool."""

    file_key: str = Field(
        ...,
        min_length=1,
        description=(
            "The key of the Figma file to fetch, often found in a provided URL "
            "like figma.com/(file|design)/<fileKey>/..."
        ),
    )
    node_id: Optional[str] = Field(
        None,
        description=(
            "The ID of the node to fetch, often found as URL parameter "
            "node-id=<nodeId>, always use if provided"
        ),
    )
    depth: Optional[int] = Field(
        None,
        ge=1,
        description=(
            "OPTIONAL. Do NOT use unless explicitly requested by the user. "
            "Controls how many levels deep to traverse the node tree."
        ),
    )


def format_generation_output(
    result: GeneratedNcdsHtml,
    output_format: str = "complete",
    include_css: bool = True,
) -> str:
    """Combine markup, usage report, import suggestion and CSS into one text."""
    if output_format == "html":
        return result.html

    sections: List[str] = []

    if result.component_usage:
        sections.append("<!-- NCDS Components Used -->")
        sections.append("<!--")
        for component, count in result.component_usage.items():
            sections.append(f"  {component}: {count} instance(s)")
        sections.append("-->")
        sections.append("")

    if result.imports:
        sections.append("<!-- React/JavaScript Import Suggestions -->")
        sections.append("<!--")
        sections.append(f"  import {{ {', '.join(result.imports)} }} from '{NCDS_PACKAGE}';")
        sections.append("-->")
        sections.append("")

    if result.css and include_css:
        sections.append("<!-- CSS Styles -->")
        sections.append("<style>")
        sections.append(result.css)
        sections.append("</style>")
        sections.append("")

    sections.append("<!-- Generated HTML -->")
    sections.append(result.html)
    return "\n".join(sections)


def _text_result(text: str, is_error: bool = False) -> Dict[str, Any]:
    result: Dict[str, Any] = {"content": [{"type": "text", "text": text}]}
    if is_error:
        result["isError"] = True
    return result


async def generate_ncds_html(
    params: GenerateNcdsHtmlParams,
    figma_client: FigmaClient,
) -> Dict[str, Any]:
    """Run the full Figma → NCDS HTML pipeline for one tool call."""
    try:
        scope = f"node {params.node_id} from file" if params.node_id else "full file"
        layers = f"{params.depth} layers deep" if params.depth else "all layers"
        logger.info(f"generate_ncds_html: {layers} of {scope} {params.file_key}")

        design = await figma_client.get_simplified_design(
            params.file_key, params.node_id, params.depth,
        )
        logger.info(
            f"generate_ncds_html: extracted {len(design.nodes)} nodes, "
            f"{len(design.global_vars.styles)} styles"
        )

        generator = NcdsHtmlGenerator(design.global_vars, params.to_generation_options())
        result = generator.generate_from_design(design)
        output = format_generation_output(result, params.output_format, params.include_css)

        logger.info("generate_ncds_html: sending result to client")
        return _text_result(output)

    except Exception as e:
        message = str(e) or type(e).__name__
        logger.error(f"generate_ncds_html: failed for file {params.file_key}: {message}")
        return _text_result(f"Error generating NCDS HTML: {message}", is_error=True)
