"""Mermaid source post-processing.

The text model is told not to wrap output in code fences but does not always
comply, so fences are stripped before the source leaves the server.
"""

import re

_LEADING_FENCE = re.compile(r"^```[ \t]*(?:mermaid)?[ \t]*\r?\n?", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\r?\n?[ \t]*```$")


def strip_code_fences(text: str) -> str:
    """
    Remove a leading ```mermaid / ``` fence and a trailing ``` fence.

    Args:
        text: Raw model output

    Returns:
        str: Trimmed Mermaid source with no fence markers at either end
    """
    cleaned = text.strip()
    # Loop so nested or doubled fences are also removed.
    while True:
        stripped = _TRAILING_FENCE.sub("", _LEADING_FENCE.sub("", cleaned)).strip()
        if stripped == cleaned:
            return stripped
        cleaned = stripped
