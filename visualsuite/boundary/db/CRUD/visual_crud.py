"""
Visual CRUD operations for archived manifestations.

Extends BaseCRUD with the archive listing query (newest first).

Dependencies: sqlalchemy, uuid, visualsuite.boundary.db.models
System role: Archive persistence queries
"""

from typing import Sequence

from sqlalchemy import select, desc
from sqlalchemy.ext.asyncio import AsyncSession

from visualsuite.boundary.db.models.visual_model import VisualModel
from visualsuite.boundary.db.CRUD.base_crud import BaseCRUD


class VisualCRUD(BaseCRUD[VisualModel]):
    """CRUD operations for VisualModel."""

    def __init__(self) -> None:
        """Initialize VisualCRUD with VisualModel."""
        super().__init__(VisualModel)

    async def list_newest_first(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[VisualModel]:
        """
        Retrieve archived visuals ordered by creation time, newest first.

        Args:
            session: Async database session
            limit: Maximum number of visuals to return
            offset: Number of visuals to skip

        Returns:
            Sequence of VisualModels, newest first
        """
        stmt = (
            select(VisualModel)
            .order_by(desc(VisualModel.created_at), desc(VisualModel.id))
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def create_manifestation(
        self,
        session: AsyncSession,
        prompt: str,
        image: str,
        enhanced_prompt: str,
        mermaid_code: str,
        style: str,
        archivist: str,
    ) -> VisualModel:
        """
        Create an archive record from a generation bundle.

        Args:
            session: Async database session
            prompt: Original user prompt
            image: Image data URI
            enhanced_prompt: Enhanced prompt text
            mermaid_code: Diagram source text
            style: Style tag
            archivist: Display name of the saver

        Returns:
            Created VisualModel instance
        """
        return await self.create(
            session,
            record_type="manifestation",
            prompt=prompt,
            image=image,
            enhanced_prompt=enhanced_prompt,
            mermaid_code=mermaid_code,
            style=style,
            archivist=archivist,
        )


visual_crud = VisualCRUD()
