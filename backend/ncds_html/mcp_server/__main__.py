"""
NCDS HTML MCP Server entrypoint.

Usage:
    python -m ncds_html.mcp_server
"""

from .main import main

if __name__ == "__main__":
    raise SystemExit(main())
