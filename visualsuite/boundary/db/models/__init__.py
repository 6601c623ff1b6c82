"""ORM models."""

from visualsuite.boundary.db.models.visual_model import VisualModel

__all__ = ["VisualModel"]
