"""Plain-text formatters for search results."""

from entur_mcp.adapters.formatters.text_formatter import TextFormatter

__all__ = ["TextFormatter"]
