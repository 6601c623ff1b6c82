"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from visualsuite.configs.base import BaseSettings
from visualsuite.configs.client import ClientSettings
from visualsuite.configs.database import DatabaseSettings
from visualsuite.configs.providers import ImageModelSettings, TextModelSettings
from visualsuite.configs.rate_limit import RateLimitSettings
from visualsuite.configs.server import ServerSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    server: ServerSettings = Field(default_factory=ServerSettings)
    text_model: TextModelSettings = Field(default_factory=TextModelSettings)
    image_model: ImageModelSettings = Field(default_factory=ImageModelSettings)
    rate_limit: RateLimitSettings = Field(default_factory=RateLimitSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    client: ClientSettings = Field(default_factory=ClientSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from visualsuite.configs import get_settings
        settings = get_settings()
        print(settings.image_model.model_url)
    """
    return Settings()
