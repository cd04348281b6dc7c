"""Entur geocoder and journey planner tools for MCP clients."""

__version__ = "1.0.0"
