"""Visual generation service layer.

Orchestrates the three requesters behind the gateway endpoints:
1. Enhancement requester (text model) with a deterministic fallback
2. Diagram requester (text model) with a fixed fallback graph
3. Image requester (image model) with no fallback

Text output is non-critical, so UpstreamModelError from the text model is
absorbed here and replaced with documented values. Image errors propagate.

Dependencies: logging, visualsuite.boundary.providers, visualsuite.core
System role: Service layer for the generation endpoints
"""

import logging

from visualsuite.boundary.providers.image_model_client import ImageModelClient
from visualsuite.boundary.providers.text_model_client import TextModelClient
from visualsuite.core.exceptions import (
    ImageCredentialMissingError,
    UpstreamModelError,
    ValidationError,
)
from visualsuite.core.fallbacks import FALLBACK_DIAGRAM, fallback_enhancement
from visualsuite.core.mermaid import strip_code_fences
from visualsuite.core.prompts import build_diagram_prompt, build_enhancement_prompt
from visualsuite.models.generation import (
    DEFAULT_STYLE,
    DiagramResult,
    GenerationResult,
    StyleTag,
)
from visualsuite.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


def require_prompt(prompt: str | None) -> str:
    """Return the prompt unchanged, or raise if it is missing or blank.

    Raises:
        ValidationError: If prompt is None, empty or whitespace-only
    """
    if prompt is None or not prompt.strip():
        raise ValidationError("Prompt is required", field="prompt")
    return prompt


class VisualGenerationService:
    """Service for prompt enhancement, image and diagram generation."""

    def __init__(
        self,
        text_client: TextModelClient,
        image_client: ImageModelClient,
    ) -> None:
        """Initialize service with provider clients.

        Args:
            text_client: Gemini client used for enhancement and diagrams
            image_client: Hugging Face client used for image synthesis
        """
        self._text_client = text_client
        self._image_client = image_client

    async def enhance_prompt(self, prompt: str, style: str) -> str:
        """Rewrite a prompt for image generation.

        Args:
            prompt: Raw user prompt
            style: Style tag value

        Returns:
            str: Enhanced prompt, or the deterministic fallback when the text
                model fails
        """
        try:
            return await self._text_client.generate(build_enhancement_prompt(prompt, style))
        except UpstreamModelError as e:
            logger.warning(
                f"{__name__}:enhance_prompt - text model failed, using fallback: {e}"
            )
            return fallback_enhancement(prompt, style)

    async def generate_diagram(self, prompt: str | None) -> DiagramResult:
        """Generate Mermaid flowchart source for a prompt.

        Args:
            prompt: Raw user prompt

        Returns:
            DiagramResult: Fence-free Mermaid source, or the fixed error graph
                when the text model fails

        Raises:
            ValidationError: If prompt is missing or blank
        """
        prompt = require_prompt(prompt)
        logger.info(f"{__name__}:generate_diagram - START prompt={safe_log_value(prompt, 120)}")

        try:
            raw = await self._text_client.generate(build_diagram_prompt(prompt))
            mermaid_code = strip_code_fences(raw)
        except UpstreamModelError as e:
            logger.warning(
                f"{__name__}:generate_diagram - text model failed, using fallback: {e}"
            )
            mermaid_code = FALLBACK_DIAGRAM

        logger.info(f"{__name__}:generate_diagram - END code_len={len(mermaid_code)}")
        return DiagramResult(mermaid_code=mermaid_code)

    async def generate_visual(
        self,
        prompt: str | None,
        style: StyleTag | None = None,
    ) -> GenerationResult:
        """Enhance the prompt, then render it with the image model.

        Args:
            prompt: Raw user prompt
            style: Style tag (defaults to realistic)

        Returns:
            GenerationResult: Enhanced prompt and image data URI

        Raises:
            ValidationError: If prompt is missing or blank
            ImageCredentialMissingError: If no image credential is configured
            UpstreamModelError: If the image model call fails
        """
        prompt = require_prompt(prompt)
        style_value = (style or DEFAULT_STYLE).value

        # Credential check happens before enhancement so no upstream call is wasted.
        if not self._image_client.is_configured:
            raise ImageCredentialMissingError()

        logger.info(f"{__name__}:generate_visual - original prompt: {safe_log_value(prompt, 200)}")
        enhanced_prompt = await self.enhance_prompt(prompt, style_value)
        logger.info(
            f"{__name__}:generate_visual - enhanced prompt: {safe_log_value(enhanced_prompt, 200)}"
        )

        image = await self._image_client.generate_data_uri(enhanced_prompt)
        logger.info(f"{__name__}:generate_visual - END image={safe_log_value(image)}")
        return GenerationResult(enhanced_prompt=enhanced_prompt, image=image)
