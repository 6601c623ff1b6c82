"""
Visual ORM model for archived manifestations.

One row per saved prompt/image/diagram bundle.

Dependencies: sqlalchemy, visualsuite.boundary.db.base
System role: Archive persistence for generated visuals
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from visualsuite.boundary.db.base import Base, UUIDMixin, TimestampMixin


class VisualModel(Base, UUIDMixin, TimestampMixin):
    """
    Archived manifestation.

    Created on explicit user action, never mutated, deleted on explicit
    user action.

    Attributes:
        id: UUID primary key (store-assigned)
        record_type: Record discriminator, always "manifestation"
        prompt: Original user prompt
        image: Generated image as a base64 data URI (may be empty)
        enhanced_prompt: Prompt after enhancement
        mermaid_code: Diagram source text (may be empty)
        style: Style tag used for generation
        archivist: Display name of the user who saved the record
        created_at: Archive timestamp (UTC)
    """

    __tablename__ = "visuals"

    record_type: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default="manifestation",
    )

    prompt: Mapped[str] = mapped_column(Text, nullable=False)

    image: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        doc="Base64 data URI of the generated image",
    )

    enhanced_prompt: Mapped[str] = mapped_column(Text, nullable=False, default="")

    mermaid_code: Mapped[str] = mapped_column(Text, nullable=False, default="")

    style: Mapped[str] = mapped_column(String(64), nullable=False)

    archivist: Mapped[str] = mapped_column(String(255), nullable=False)
