"""
NCDS HTML MCP Server - Tool definitions and handlers

Exposes NCDS generation tools for MCP clients:
- generate_ncds_html: Generate NCDS UI Admin HTML from a Figma file/node
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ncds_html.integrations.figma_client import FigmaClient, FigmaClientError
from ncds_html.tools.generate_ncds_html import GenerateNcdsHtmlParams, generate_ncds_html


class MCPError(Exception):
    """MCP tool call error"""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}


# =============================================================================
# MCP Tool Definitions
# =============================================================================


MCP_TOOLS: List[Dict[str, Any]] = [
    {
        "name": "generate_ncds_html",
        "description": (
            "Generate HTML code using NCDS UI Admin components from Figma design data.\n\n"
            "Maps Figma layers to @ncds/ui-admin components (Button, InputBase, Select, "
            "Modal, HorizontalTab, Pagination, ...) and generates corresponding HTML "
            "markup suitable for PHP projects. Unrecognized layers become plain div/span/img.\n\n"
            "Returns: component usage summary, import suggestion, CSS and HTML"
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "file_key": {
                    "type": "string",
                    "description": (
                        "The key of the Figma file to fetch, often found in a provided URL "
                        "like figma.com/(file|design)/<fileKey>/..."
                    ),
                },
                "node_id": {
                    "type": "string",
                    "description": "The ID of the node to fetch (URL parameter node-id), always use if provided",
                },
                "depth": {
                    "type": "integer",
                    "minimum": 1,
                    "description": "OPTIONAL. Do NOT use unless explicitly requested. Levels of the node tree to traverse.",
                },
                "include_css": {"type": "boolean", "default": True, "description": "Include NCDS CSS styles in the output"},
                "include_comments": {"type": "boolean", "default": True, "description": "Include HTML comments for debugging"},
                "php_naming_convention": {
                    "type": "boolean", "default": True,
                    "description": "Use PHP-style naming conventions for element ids",
                },
                "generate_ncds_imports": {
                    "type": "boolean", "default": True,
                    "description": "Generate list of NCDS components used",
                },
                "wrap_in_container": {
                    "type": "boolean", "default": True,
                    "description": "Wrap the generated HTML in a container div",
                },
                "output_format": {
                    "type": "string",
                    "enum": ["html", "complete"],
                    "default": "complete",
                    "description": "'html' for HTML only, 'complete' for HTML + CSS + imports",
                },
            },
            "required": ["file_key"],
        },
    },
]


# =============================================================================
# Tool Call Handler
# =============================================================================


async def handle_tool_call(name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
    """Handle MCP tool call by dispatching to the appropriate function."""

    if name == "generate_ncds_html":
        try:
            params = GenerateNcdsHtmlParams(**(arguments or {}))
        except ValidationError as e:
            raise MCPError(
                code="invalid_arguments",
                message=f"Invalid arguments for {name}",
                details={"errors": e.errors(include_url=False)},
            ) from e

        try:
            client = FigmaClient()
        except FigmaClientError as e:
            raise MCPError(code="figma_token_missing", message=str(e)) from e

        try:
            return await generate_ncds_html(params, client)
        finally:
            await client.close()

    raise MCPError(
        code="unknown_tool",
        message=f"Unknown tool: {name}",
        details={"available_tools": [t["name"] for t in MCP_TOOLS]},
    )
