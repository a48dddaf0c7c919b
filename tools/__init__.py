"""MCP tool registration for the weather server."""
