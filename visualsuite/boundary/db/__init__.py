"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - build_async_engine(), build_session_factory(): Async connection management
  - create_tables(): Schema bootstrap
  - VisualModel: Archived manifestation entity
  - visual_crud: CRUD operation singleton

Dependencies: sqlalchemy, visualsuite.configs
System role: Archive store adapter
"""

from visualsuite.boundary.db.base import Base, TimestampMixin, UUIDMixin
from visualsuite.boundary.db.connection import (
    build_async_engine,
    build_session_factory,
    create_tables,
)
from visualsuite.boundary.db.models.visual_model import VisualModel
from visualsuite.boundary.db.CRUD import BaseCRUD, VisualCRUD, visual_crud

__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "build_async_engine",
    "build_session_factory",
    "create_tables",
    "VisualModel",
    "BaseCRUD",
    "VisualCRUD",
    "visual_crud",
]
