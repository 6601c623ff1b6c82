"""API data models."""

from visualsuite.models.common import ErrorResponse
from visualsuite.models.generation import (
    DEFAULT_STYLE,
    DiagramRequest,
    DiagramResult,
    GenerateRequest,
    GenerationResult,
    StyleTag,
)
from visualsuite.models.visual import VisualCreateRequest, VisualResponse

__all__ = [
    "DEFAULT_STYLE",
    "DiagramRequest",
    "DiagramResult",
    "ErrorResponse",
    "GenerateRequest",
    "GenerationResult",
    "StyleTag",
    "VisualCreateRequest",
    "VisualResponse",
]
