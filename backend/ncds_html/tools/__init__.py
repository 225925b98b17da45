"""Tool handlers shared by the MCP server and the HTTP API."""
