"""Substitute values used when the text model is unavailable.

Text output is non-critical: the enhancement and diagram requesters raise
UpstreamModelError and the service layer substitutes these values.
"""

QUALITY_DESCRIPTORS = ("high resolution", "ultra detailed", "cinematic lighting")

FALLBACK_DIAGRAM = "graph TD\nA[Error] --> B[Diagram Generation Failed]"


def fallback_enhancement(prompt: str, style: str) -> str:
    """Deterministic enhancement: prompt, style, then fixed quality descriptors."""
    return ", ".join((prompt, style, *QUALITY_DESCRIPTORS))
