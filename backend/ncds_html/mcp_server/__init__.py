"""MCP surface: tool definitions, dispatcher, stdio server."""
