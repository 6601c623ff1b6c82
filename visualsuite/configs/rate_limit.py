"""
Rate limit configuration settings.

Fixed-window limits applied to all gateway traffic per caller address.

Dependencies: pydantic, pydantic_settings
System role: Gateway throttling configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RateLimitSettings(BaseSettings):
    """Fixed-window rate limiter configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RATE_LIMIT_",
        case_sensitive=False,
        extra="ignore",
    )

    enabled: bool = Field(default=True, description="Enable request throttling")
    window_seconds: int = Field(default=15 * 60, gt=0, description="Window length in seconds")
    max_requests: int = Field(default=100, gt=0, description="Requests allowed per window")
    message: str = Field(
        default="Too many requests from this IP, please try again after 15 minutes",
        description="Error message returned when the limit is exceeded",
    )
