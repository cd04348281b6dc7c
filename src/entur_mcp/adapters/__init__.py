"""Adapters for external APIs, configuration and the MCP tool server."""
