"""Figma → NCDS UI Admin HTML generator.

Subpackages:
- mappers: Rule-based component classification, property inference, validation
- generators: Recursive HTML generation, widget templates, stylesheet
- integrations: Figma REST client and raw-node simplifier
- tools: The generate_ncds_html tool handler
- mcp_server: MCP tool definitions and stdio server
"""
