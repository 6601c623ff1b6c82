"""Instruction templates for the hosted text model.

Two fixed templates: one rewrites a user prompt for image synthesis, the other
asks for Mermaid flowchart source with no delimiters.

Dependencies: None (pure prompt templates)
System role: Request shaping for the text-generation requesters
"""

ENHANCEMENT_PROMPT_TEMPLATE = """
Improve this text prompt for AI image generation.
Make it detailed, cinematic, high resolution, and ultra-realistic.
Incorporate the style: {style}.
Return ONLY the improved prompt text. Do not include any explanations or extra words.

User Prompt: {prompt}
"""

DIAGRAM_PROMPT_TEMPLATE = """
Create a Mermaid.js diagram for: "{prompt}".
Format: flowchart (graph TD).
Requirement: Respond ONLY with the Mermaid code.
No backticks, no "mermaid" keyword, no preamble.
Example:
graph TD
A[Start] --> B[Next]
"""


def build_enhancement_prompt(prompt: str, style: str) -> str:
    """Embed the user prompt and style tag in the enhancement instruction."""
    return ENHANCEMENT_PROMPT_TEMPLATE.format(prompt=prompt, style=style)


def build_diagram_prompt(prompt: str) -> str:
    """Embed the user prompt in the diagram instruction."""
    return DIAGRAM_PROMPT_TEMPLATE.format(prompt=prompt)
