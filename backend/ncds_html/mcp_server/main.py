"""
NCDS HTML MCP Server - stdio entrypoint

Registers the tools from server.py with FastMCP and serves them over stdio.
"""

from __future__ import annotations

from typing import Literal, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from ncds_html.logging_config import get_mcp_logger
from ncds_html.mcp_server.server import MCP_TOOLS, MCPError, handle_tool_call

logger = get_mcp_logger()

_TOOL_DESCRIPTIONS = {tool["name"]: tool["description"] for tool in MCP_TOOLS}

mcp = FastMCP("ncds_html")


@mcp.tool(name="generate_ncds_html", description=_TOOL_DESCRIPTIONS["generate_ncds_html"])
async def generate_ncds_html_tool(
    file_key: str,
    node_id: Optional[str] = None,
    depth: Optional[int] = None,
    include_css: Optional[bool] = None,
    include_comments: Optional[bool] = None,
    php_naming_convention: Optional[bool] = None,
    generate_ncds_imports: Optional[bool] = None,
    wrap_in_container: Optional[bool] = None,
    output_format: Literal["html", "complete"] = "complete",
) -> str:
    # Omitted switches fall through to the NCDS_* settings defaults
    arguments = {
        key: value
        for key, value in {
            "file_key": file_key,
            "node_id": node_id,
            "depth": depth,
            "include_css": include_css,
            "include_comments": include_comments,
            "php_naming_convention": php_naming_convention,
            "generate_ncds_imports": generate_ncds_imports,
            "wrap_in_container": wrap_in_container,
            "output_format": output_format,
        }.items()
        if value is not None
    }
    try:
        result = await handle_tool_call("generate_ncds_html", arguments)
    except MCPError as e:
        logger.error(f"generate_ncds_html: {e.code}: {e.message}")
        raise ToolError(f"{e.code}: {e.message}") from e

    text = result["content"][0]["text"]
    if result.get("isError"):
        raise ToolError(text)
    return text


def main() -> int:
    logger.info("Starting NCDS HTML MCP server (stdio)")
    mcp.run()
    return 0
