"""Generation endpoints.

Routes:
- POST /generate - Enhance a prompt and render it as an image
- POST /generate-diagram - Produce Mermaid flowchart source for a prompt

Dependencies: visualsuite.application.services.generation_service
System role: Request gateway for the hosted models
"""

import logging

from fastapi import APIRouter, Depends

from visualsuite.api.deps import get_generation_service
from visualsuite.api.errors import error_response
from visualsuite.application.services.generation_service import VisualGenerationService
from visualsuite.core.exceptions import VisualSuiteException
from visualsuite.models.common import ErrorResponse
from visualsuite.models.generation import (
    DiagramRequest,
    DiagramResult,
    GenerateRequest,
    GenerationResult,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["generation"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Prompt missing or blank"},
    500: {"model": ErrorResponse, "description": "Upstream or internal failure"},
}


@router.post(
    "/generate",
    response_model=GenerationResult,
    responses=_ERROR_RESPONSES,
)
async def generate(
    request: GenerateRequest,
    generation_service: VisualGenerationService = Depends(get_generation_service),
):
    """Enhance the prompt with the text model, then render it with the image model.

    Request body:
    - prompt: Concept to visualise (required, non-blank)
    - style: realistic | anime | cinematic | 3d render (default realistic)

    Response:
    - enhancedPrompt: Prompt after enhancement (or the deterministic fallback)
    - image: data:image/...;base64,... payload

    Raises:
        400: Prompt missing or blank (no upstream call made)
        500: Image credential missing, image model failure, or unexpected error
    """
    try:
        return await generation_service.generate_visual(request.prompt, request.style)
    except VisualSuiteException:
        raise
    except Exception as e:
        logger.exception(f"{__name__}:generate - {type(e).__name__}: {e}")
        return error_response(500, "Internal Server Error")


@router.post(
    "/generate-diagram",
    response_model=DiagramResult,
    responses=_ERROR_RESPONSES,
)
async def generate_diagram(
    request: DiagramRequest,
    generation_service: VisualGenerationService = Depends(get_generation_service),
):
    """Generate Mermaid flowchart source for the prompt.

    Text-model failures never reach this handler (the service substitutes a
    fixed error graph), so 500 only covers unexpected exceptions.
    """
    try:
        return await generation_service.generate_diagram(request.prompt)
    except VisualSuiteException:
        raise
    except Exception as e:
        logger.exception(f"{__name__}:generate_diagram - {type(e).__name__}: {e}")
        return error_response(500, "Failed to generate diagram", {"message": str(e)})
