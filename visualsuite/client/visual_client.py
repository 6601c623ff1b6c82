"""
Gateway client orchestrator.

Runs one manifestation as two concurrent gateway calls (image and diagram),
joins both before returning, and collapses any failure into one generic
error. Also wraps the archive endpoints.

Dependencies: asyncio, httpx, visualsuite.models, visualsuite.configs
System role: Client side of the TextToVisual suite
"""

import asyncio
import logging
import time
from pathlib import Path
from typing import Any
from uuid import UUID

import httpx
from pydantic import BaseModel

from visualsuite.boundary.providers.image_model_client import decode_data_uri
from visualsuite.configs import get_settings
from visualsuite.core.exceptions import (
    ArchiveError,
    PartialManifestationError,
    ValidationError,
)
from visualsuite.models.generation import (
    DEFAULT_STYLE,
    DiagramResult,
    GenerationResult,
    StyleTag,
)
from visualsuite.models.visual import VisualCreateRequest, VisualResponse

logger = logging.getLogger(__name__)

EMPTY_PROMPT_MESSAGE = "Please enter a concept to manifest."
PARTIAL_FAILURE_MESSAGE = "Neural manifestation partially failed. Check your connection."
ARCHIVE_FAILED_MESSAGE = "Failed to archive manifestation."
HISTORY_FAILED_MESSAGE = "Failed to load history."
DELETE_FAILED_MESSAGE = "Failed to delete."

_IMAGE_EXTENSIONS = {"image/png": ".png", "image/webp": ".webp"}


class Manifestation(BaseModel):
    """Joined result of one user action."""

    prompt: str
    style: StyleTag = DEFAULT_STYLE
    enhanced_prompt: str = ""
    image: str = ""
    mermaid_code: str = ""

    @property
    def has_content(self) -> bool:
        """Whether there is anything worth archiving."""
        return bool(self.image or self.mermaid_code)


class VisualSuiteClient:
    """Async client for the TextToVisual gateway.

    Usage:
        async with VisualSuiteClient() as client:
            manifestation = await client.manifest("a red fox in snow", "anime")
            await client.archive(manifestation, archivist="Ada")
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize client.

        Args:
            base_url: Gateway URL (defaults to VISUAL_SUITE_BASE_URL)
            timeout: Per-request timeout in seconds
            http_client: Shared AsyncClient (not closed by this client)
        """
        settings = get_settings().client
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=timeout or settings.timeout_seconds
        )

    async def __aenter__(self) -> "VisualSuiteClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def _post_json(self, path: str, payload: dict[str, Any]) -> Any:
        response = await self._http.post(self._url(path), json=payload)
        response.raise_for_status()
        return response.json()

    async def manifest(self, prompt: str, style: StyleTag | str = DEFAULT_STYLE) -> Manifestation:
        """Generate image and diagram for one prompt concurrently.

        Both calls are awaited before anything is returned. Either failing
        yields the same generic error; which half failed is only logged.

        Args:
            prompt: Concept to manifest
            style: Style tag for the image

        Returns:
            Manifestation: Enhanced prompt, image and diagram

        Raises:
            ValidationError: If prompt is blank (no request is sent)
            PartialManifestationError: If either call fails
        """
        if not prompt or not prompt.strip():
            raise ValidationError(EMPTY_PROMPT_MESSAGE, field="prompt")
        style = StyleTag(style)

        image_outcome, diagram_outcome = await asyncio.gather(
            self._post_json("/generate", {"prompt": prompt, "style": style.value}),
            self._post_json("/generate-diagram", {"prompt": prompt}),
            return_exceptions=True,
        )

        try:
            for outcome in (image_outcome, diagram_outcome):
                if isinstance(outcome, BaseException):
                    raise outcome
            generation = GenerationResult.model_validate(image_outcome)
            diagram = DiagramResult.model_validate(diagram_outcome)
        except Exception as e:
            logger.error(f"{__name__}:manifest - {type(e).__name__}: {e}")
            raise PartialManifestationError(PARTIAL_FAILURE_MESSAGE) from e

        return Manifestation(
            prompt=prompt,
            style=style,
            enhanced_prompt=generation.enhanced_prompt,
            image=generation.image,
            mermaid_code=diagram.mermaid_code,
        )

    async def archive(self, manifestation: Manifestation, archivist: str) -> VisualResponse:
        """Save a manifestation to the archive.

        Raises:
            ValidationError: If archivist is blank or there is nothing to save
            ArchiveError: If the gateway call fails
        """
        if not archivist or not archivist.strip():
            raise ValidationError("Archivist name is required", field="archivist")
        if not manifestation.has_content:
            raise ValidationError("Nothing to archive")

        request = VisualCreateRequest(
            prompt=manifestation.prompt,
            image=manifestation.image,
            enhanced_prompt=manifestation.enhanced_prompt,
            mermaid_code=manifestation.mermaid_code,
            style=manifestation.style,
            archivist=archivist.strip(),
        )
        try:
            data = await self._post_json("/visuals", request.model_dump(mode="json", by_alias=True))
            return VisualResponse.model_validate(data)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"{__name__}:archive - {type(e).__name__}: {e}")
            raise ArchiveError(ARCHIVE_FAILED_MESSAGE) from e

    async def history(self, limit: int | None = None) -> list[VisualResponse]:
        """List archived visuals, newest first.

        Raises:
            ArchiveError: If the gateway call fails
        """
        params = {"limit": limit} if limit is not None else None
        try:
            response = await self._http.get(self._url("/visuals"), params=params)
            response.raise_for_status()
            return [VisualResponse.model_validate(item) for item in response.json()]
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"{__name__}:history - {type(e).__name__}: {e}")
            raise ArchiveError(HISTORY_FAILED_MESSAGE) from e

    async def delete(self, visual_id: UUID | str) -> None:
        """Delete one archived visual.

        Raises:
            ArchiveError: If the gateway call fails
        """
        try:
            response = await self._http.delete(self._url(f"/visuals/{visual_id}"))
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"{__name__}:delete - {type(e).__name__}: {e}")
            raise ArchiveError(DELETE_FAILED_MESSAGE) from e


def save_image(manifestation: Manifestation, directory: str | Path = ".") -> Path:
    """Write the manifestation image to manifest-<epoch-ms>.<ext>.

    Raises:
        ValidationError: If the manifestation has no image
    """
    if not manifestation.image:
        raise ValidationError("No image to save", field="image")
    data, mime_type = decode_data_uri(manifestation.image)
    extension = _IMAGE_EXTENSIONS.get(mime_type, ".jpg")
    path = Path(directory) / f"manifest-{int(time.time() * 1000)}{extension}"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path
