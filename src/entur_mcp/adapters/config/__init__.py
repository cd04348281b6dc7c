"""Configuration adapters."""

from entur_mcp.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
