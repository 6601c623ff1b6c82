"""
Hosted model provider settings.

Credentials and endpoints for the text model (Gemini) used for prompt
enhancement and diagram synthesis, and the image model (Hugging Face
inference) used for image synthesis.

Dependencies: pydantic, pydantic_settings
System role: Upstream provider configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TextModelSettings(BaseSettings):
    """Gemini text-generation configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GEMINI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="Gemini API key")
    model: str = Field(default="gemini-1.5-flash", description="Gemini model ID")
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature",
    )


class ImageModelSettings(BaseSettings):
    """Hugging Face image-generation configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="HUGGINGFACE_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="Hugging Face API token")
    model_url: str = Field(
        default="https://router.huggingface.co/hf-inference/models/black-forest-labs/FLUX.1-schnell",
        description="Inference endpoint for the image model",
    )
    timeout_seconds: float = Field(
        default=120.0,
        description="Upstream request timeout in seconds",
    )
