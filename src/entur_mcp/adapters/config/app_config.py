"""12-factor configuration adapter using environment variables and an optional .env file."""

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from entur_mcp.adapters.entur_api.constants import (
    DEFAULT_ET_CLIENT_NAME,
    GEOCODER_URL,
    JOURNEY_PLANNER_URL,
)

MCP_TRANSPORTS = ("stdio", "sse", "streamable-http")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=3000, description="Port to bind the server to")
    mcp_transport: str = Field(
        default="streamable-http",
        description="MCP transport: 'stdio', 'sse' or 'streamable-http'",
    )
    server_name: str = Field(default="entur-mcp", description="Name announced to MCP clients")
    log_level: str = Field(default="INFO", description="Root logging level")

    # Entur API configuration
    et_client_name: str = Field(
        default=DEFAULT_ET_CLIENT_NAME,
        description="Client identifier sent in the ET-Client-Name header",
    )
    geocoder_url: str = Field(default=GEOCODER_URL, description="Geocoder autocomplete URL")
    journey_planner_url: str = Field(
        default=JOURNEY_PLANNER_URL, description="Journey Planner v3 GraphQL URL"
    )
    api_timeout_seconds: int = Field(
        default=10, description="Total timeout for Entur API requests in seconds"
    )
    default_language: str = Field(
        default="en", description="Language of geocoder labels (e.g., 'en', 'nb')"
    )

    # Display configuration
    timezone: str = Field(
        default="Europe/Oslo",
        description="Timezone for clock times in tool output (IANA timezone name)",
    )

    @field_validator("mcp_transport")
    @classmethod
    def validate_mcp_transport(cls, v: str) -> str:
        """Validate the MCP transport is one FastMCP can run."""
        if v not in MCP_TRANSPORTS:
            raise ValueError(f"mcp_transport must be one of {', '.join(MCP_TRANSPORTS)}")
        return v

    @field_validator("et_client_name")
    @classmethod
    def validate_et_client_name(cls, v: str) -> str:
        """Entur rejects anonymous clients, so the name must not be blank."""
        if not v.strip():
            raise ValueError("et_client_name must not be empty")
        return v.strip()

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be a valid IANA timezone name: {v}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level

    @property
    def zone(self) -> ZoneInfo:
        """Timezone object for formatting clock times."""
        return ZoneInfo(self.timezone)
