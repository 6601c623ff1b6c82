"""Service orchestrators."""

from .archive_service import ArchiveService
from .generation_service import VisualGenerationService

__all__ = [
    "ArchiveService",
    "VisualGenerationService",
]
