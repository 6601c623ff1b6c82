"""
Common response models.

Error schema shared by all endpoints.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(description="Error message")
    details: Any | None = Field(default=None, description="Additional error context")
