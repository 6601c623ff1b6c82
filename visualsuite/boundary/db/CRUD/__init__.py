"""CRUD operation classes and singletons."""

from visualsuite.boundary.db.CRUD.base_crud import BaseCRUD
from visualsuite.boundary.db.CRUD.visual_crud import VisualCRUD, visual_crud

__all__ = ["BaseCRUD", "VisualCRUD", "visual_crud"]
