"""
Health check API endpoints.

Routes: GET / (liveness text), GET /health

Dependencies: fastapi, pydantic
System role: Health check HTTP API
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

LIVENESS_TEXT = "TextToVisual AI Suite is running!"


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
async def liveness() -> str:
    """Plain-text liveness probe."""
    return LIVENESS_TEXT


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")
