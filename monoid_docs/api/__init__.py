"""HTTP transport for the MCP documentation server."""
