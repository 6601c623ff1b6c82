"""Archive endpoints.

Routes:
- POST /visuals - Archive a generation bundle
- GET /visuals - List archived visuals, newest first
- GET /visuals/{visual_id} - Retrieve one archived visual
- DELETE /visuals/{visual_id} - Delete one archived visual

Dependencies: visualsuite.application.services.archive_service
System role: Archive store HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from visualsuite.api.deps import get_archive_service
from visualsuite.api.errors import error_response
from visualsuite.application.services.archive_service import ArchiveService
from visualsuite.core.exceptions import VisualSuiteException
from visualsuite.models.visual import VisualCreateRequest, VisualResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/visuals", tags=["visuals"])


@router.post("", response_model=VisualResponse, status_code=status.HTTP_201_CREATED)
async def archive_visual(
    request: VisualCreateRequest,
    archive_service: ArchiveService = Depends(get_archive_service),
):
    """Archive a prompt/image/diagram bundle under the archivist's name."""
    try:
        visual = await archive_service.archive(
            prompt=request.prompt,
            image=request.image,
            enhanced_prompt=request.enhanced_prompt,
            mermaid_code=request.mermaid_code,
            style=request.style.value,
            archivist=request.archivist,
        )
        return VisualResponse.model_validate(visual)
    except VisualSuiteException:
        raise
    except Exception as e:
        logger.exception(f"{__name__}:archive_visual - {type(e).__name__}: {e}")
        return error_response(500, "Failed to archive manifestation")


@router.get("", response_model=list[VisualResponse])
async def list_visuals(
    limit: int | None = Query(default=None, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    archive_service: ArchiveService = Depends(get_archive_service),
):
    """List archived visuals ordered by creation time, newest first."""
    try:
        visuals = await archive_service.list_visuals(limit=limit, offset=offset)
        logger.info(f"{__name__}:list_visuals - returning {len(visuals)} visuals")
        return [VisualResponse.model_validate(v) for v in visuals]
    except Exception as e:
        logger.exception(f"{__name__}:list_visuals - {type(e).__name__}: {e}")
        return error_response(500, "Failed to load history")


@router.get("/{visual_id}", response_model=VisualResponse)
async def get_visual(
    visual_id: UUID,
    archive_service: ArchiveService = Depends(get_archive_service),
):
    """Retrieve one archived visual."""
    visual = await archive_service.get_visual(visual_id)
    return VisualResponse.model_validate(visual)


@router.delete("/{visual_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_visual(
    visual_id: UUID,
    archive_service: ArchiveService = Depends(get_archive_service),
):
    """Delete one archived visual."""
    try:
        await archive_service.delete_visual(visual_id)
    except VisualSuiteException:
        raise
    except Exception as e:
        logger.exception(f"{__name__}:delete_visual - {type(e).__name__}: {e}")
        return error_response(500, "Failed to delete")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
