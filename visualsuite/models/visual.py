"""
Archive domain models and schemas.

Request/response schemas for archived manifestations.

Dependencies: pydantic
System role: Archive API contracts
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from visualsuite.models.generation import DEFAULT_STYLE, StyleTag


class VisualCreateRequest(BaseModel):
    """Request to archive a generation bundle."""

    model_config = ConfigDict(populate_by_name=True)

    prompt: str = Field(min_length=1, description="Original user prompt")
    image: str = Field(default="", description="Image data URI")
    enhanced_prompt: str = Field(default="", alias="enhancedPrompt")
    mermaid_code: str = Field(default="", alias="mermaidCode")
    style: StyleTag = Field(default=DEFAULT_STYLE)
    archivist: str = Field(description="Display name of the user saving the record")


class VisualResponse(BaseModel):
    """Archived manifestation as returned to clients."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    type: str = Field(default="manifestation", validation_alias="record_type")
    prompt: str
    image: str
    enhanced_prompt: str = Field(alias="enhancedPrompt")
    mermaid_code: str = Field(alias="mermaidCode")
    style: str
    archivist: str
    created_at: datetime = Field(alias="createdAt")
