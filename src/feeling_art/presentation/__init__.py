"""Presentation layer: MCP server."""
