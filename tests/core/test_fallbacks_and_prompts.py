"""Tests for instruction templates and fallback values."""

from visualsuite.core.fallbacks import FALLBACK_DIAGRAM, fallback_enhancement
from visualsuite.core.prompts import build_diagram_prompt, build_enhancement_prompt


class TestFallbackEnhancement:
    """Tests for the deterministic enhancement fallback."""

    def test_exact_format(self) -> None:
        """Prompt, style and fixed descriptors joined by comma-space."""
        assert (
            fallback_enhancement("a red fox in snow", "anime")
            == "a red fox in snow, anime, high resolution, ultra detailed, cinematic lighting"
        )

    def test_multi_word_style(self) -> None:
        assert fallback_enhancement("castle", "3d render") == (
            "castle, 3d render, high resolution, ultra detailed, cinematic lighting"
        )


class TestFallbackDiagram:
    """Tests for the fixed error graph."""

    def test_two_node_error_graph(self) -> None:
        assert FALLBACK_DIAGRAM == "graph TD\nA[Error] --> B[Diagram Generation Failed]"


class TestPromptTemplates:
    """Tests for the text-model instructions."""

    def test_enhancement_prompt_embeds_prompt_and_style(self) -> None:
        text = build_enhancement_prompt("a red fox in snow", "anime")
        assert "User Prompt: a red fox in snow" in text
        assert "Incorporate the style: anime." in text
        assert "Return ONLY the improved prompt text" in text

    def test_diagram_prompt_embeds_prompt(self) -> None:
        text = build_diagram_prompt("how tea is made")
        assert 'Create a Mermaid.js diagram for: "how tea is made".' in text
        assert "graph TD" in text
        assert "No backticks" in text
