"""Client orchestrator for the TextToVisual gateway."""

from visualsuite.client.visual_client import Manifestation, VisualSuiteClient, save_image

__all__ = ["Manifestation", "VisualSuiteClient", "save_image"]
