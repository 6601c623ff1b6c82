"""Tests for Mermaid code-fence stripping."""

import pytest

from visualsuite.core.mermaid import strip_code_fences

BODY = "graph TD\nA[Start] --> B[Next]"


class TestStripCodeFences:
    """Tests for strip_code_fences()."""

    @pytest.mark.parametrize(
        "raw",
        [
            BODY,
            f"```mermaid\n{BODY}\n```",
            f"```\n{BODY}\n```",
            f"  ```mermaid\n{BODY}\n```  \n",
            f"```Mermaid\n{BODY}```",
            f"```mermaid\n{BODY}",
            f"{BODY}\n```",
            f"```mermaid\n```mermaid\n{BODY}\n```\n```",
        ],
    )
    def test_returns_body_without_fences(self, raw: str) -> None:
        assert strip_code_fences(raw) == BODY

    @pytest.mark.parametrize("raw", ["```", "``````", "```mermaid\n```", "   "])
    def test_fence_only_input_becomes_empty(self, raw: str) -> None:
        assert strip_code_fences(raw) == ""

    def test_inner_backticks_are_preserved(self) -> None:
        raw = "graph TD\nA[`code`] --> B"
        assert strip_code_fences(raw) == raw

    def test_idempotent(self) -> None:
        once = strip_code_fences(f"```mermaid\n{BODY}\n```")
        assert strip_code_fences(once) == once
