"""Core runtime for the Sheeter MCP server: configuration, API client, errors and server."""
