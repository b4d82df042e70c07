"""12-factor configuration adapter using environment variables and an optional .env file."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


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
    port: int = Field(default=8000, description="Port to bind the server to")
    log_level: str = Field(default="INFO", description="Logging level for the application")
    transport: str = Field(
        default="http",
        description="How MCP clients reach the server: 'http' (SSE and Streamable HTTP) or 'stdio'",
    )

    # MCP server configuration
    server_name: str = Field(
        default="Timezone Finder", description="Server name announced to MCP clients"
    )
    stateless_http: bool = Field(
        default=True,
        description="Serve the Streamable HTTP transport without per-client sessions",
    )

    # Geolocation API configuration
    geoip_api_url: str = Field(
        default="http://ip-api.com/json",
        description="Base URL of the IP geolocation API; the address is appended as a path segment",
    )
    geoip_api_timeout: float | None = Field(
        default=None,
        description="Timeout for geolocation requests in seconds (unset uses the network stack defaults)",
    )

    @field_validator("transport")
    @classmethod
    def validate_transport(cls, v: str) -> str:
        """Validate transport is either 'http' or 'stdio'."""
        if v.lower() not in ("http", "stdio"):
            raise ValueError("transport must be either 'http' or 'stdio'")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()
