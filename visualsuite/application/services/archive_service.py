"""
Archive service orchestrator.

Wraps create/list/get/delete of archived manifestations. Each operation
commits on its own; there is no conflict handling and last write wins.

Dependencies: visualsuite.boundary.db.CRUD, visualsuite.core
System role: Persistence adapter use cases
"""

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from visualsuite.boundary.db.CRUD.visual_crud import visual_crud
from visualsuite.boundary.db.models.visual_model import VisualModel
from visualsuite.core.exceptions import ValidationError, VisualNotFoundError
from visualsuite.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class ArchiveService:
    """Archive service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize archive service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def archive(
        self,
        prompt: str,
        image: str,
        enhanced_prompt: str,
        mermaid_code: str,
        style: str,
        archivist: str,
    ) -> VisualModel:
        """
        Persist one generation bundle.

        Args:
            prompt: Original user prompt
            image: Image data URI ("" when only a diagram was produced)
            enhanced_prompt: Enhanced prompt text
            mermaid_code: Diagram source ("" when only an image was produced)
            style: Style tag value
            archivist: Display name of the saver

        Returns:
            VisualModel: Created record

        Raises:
            ValidationError: If archivist is blank or there is nothing to save
        """
        if not archivist or not archivist.strip():
            raise ValidationError("Archivist name is required", field="archivist")
        if not image and not mermaid_code:
            raise ValidationError("Nothing to archive: image and diagram are both empty")

        visual = await visual_crud.create_manifestation(
            self.db,
            prompt=prompt,
            image=image,
            enhanced_prompt=enhanced_prompt,
            mermaid_code=mermaid_code,
            style=style,
            archivist=archivist.strip(),
        )
        await self.db.commit()

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:archive - created visual",
            visual_id=visual.id,
            archivist=visual.archivist,
            image=visual.image,
        )
        return visual

    async def list_visuals(
        self,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[VisualModel]:
        """
        List archived visuals, newest first.

        Args:
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            Sequence[VisualModel]: Records ordered by creation time descending
        """
        return await visual_crud.list_newest_first(self.db, limit=limit, offset=offset)

    async def get_visual(self, visual_id: UUID) -> VisualModel:
        """
        Get one archived visual.

        Raises:
            VisualNotFoundError: If no record has this ID
        """
        visual = await visual_crud.get_by_id(self.db, visual_id)
        if visual is None:
            raise VisualNotFoundError(str(visual_id))
        return visual

    async def delete_visual(self, visual_id: UUID) -> None:
        """
        Delete one archived visual.

        Raises:
            VisualNotFoundError: If no record has this ID
        """
        deleted = await visual_crud.delete_by_id(self.db, visual_id)
        if not deleted:
            raise VisualNotFoundError(str(visual_id))
        await self.db.commit()
        logger.info(f"{__name__}:delete_visual - deleted visual_id={visual_id}")
