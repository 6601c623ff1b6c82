"""
Generation domain models and schemas.

Request/response schemas for image and Mermaid diagram generation. Field
names are snake_case in Python and camelCase on the wire.

Dependencies: pydantic
System role: Generation API contracts
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StyleTag(str, Enum):
    """Image styles offered to the user."""

    REALISTIC = "realistic"
    ANIME = "anime"
    CINEMATIC = "cinematic"
    RENDER_3D = "3d render"


DEFAULT_STYLE = StyleTag.REALISTIC


class GenerateRequest(BaseModel):
    """Request schema for image generation.

    Prompt presence is checked by the service so blank prompts map to 400
    rather than a schema error.
    """

    prompt: str | None = Field(default=None, description="Free-text concept to visualise")
    style: StyleTag | None = Field(default=None, description="Style tag (defaults to realistic)")

    @field_validator("style", mode="before")
    @classmethod
    def blank_style_means_default(cls, value):
        """Treat an empty or whitespace style as absent."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


class DiagramRequest(BaseModel):
    """Request schema for diagram generation."""

    prompt: str | None = Field(default=None, description="Free-text concept to diagram")


class GenerationResult(BaseModel):
    """Enhanced prompt plus the generated image."""

    model_config = ConfigDict(populate_by_name=True)

    enhanced_prompt: str = Field(alias="enhancedPrompt", description="Prompt after enhancement")
    image: str = Field(description="Generated image as a base64 data URI")


class DiagramResult(BaseModel):
    """Generated Mermaid source."""

    model_config = ConfigDict(populate_by_name=True)

    mermaid_code: str = Field(alias="mermaidCode", description="Mermaid flowchart source")
