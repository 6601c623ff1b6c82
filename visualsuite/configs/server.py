"""
HTTP server configuration settings.

Bind address, CORS origins and request body limits for the gateway.

Dependencies: pydantic, pydantic_settings
System role: Gateway process configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """Uvicorn and HTTP gateway configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=3000, description="Bind port (PORT)")
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins",
    )
    max_body_bytes: int = Field(
        default=50 * 1024 * 1024,
        description="Maximum accepted request body size in bytes",
    )
