"""TextToVisual AI Suite: prompt enhancement, image synthesis and Mermaid diagrams."""

__version__ = "0.1.0"
