"""
Client configuration settings.

Where the client orchestrator finds the gateway.

Dependencies: pydantic, pydantic_settings
System role: Client-side configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Settings for the gateway client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VISUAL_SUITE_",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(default="http://localhost:3000", description="Gateway base URL")
    timeout_seconds: float = Field(
        default=180.0,
        description="Per-request timeout; image synthesis can be slow",
    )
