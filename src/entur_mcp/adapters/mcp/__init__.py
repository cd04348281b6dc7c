"""MCP tool server adapter."""

from entur_mcp.adapters.mcp.server import EnturToolHandlers, create_mcp_server, register_tools

__all__ = ["EnturToolHandlers", "create_mcp_server", "register_tools"]
