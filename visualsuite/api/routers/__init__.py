"""API routers."""

from .generation import router as generation_router
from .health import router as health_router
from .visuals import router as visuals_router

__all__ = [
    "generation_router",
    "health_router",
    "visuals_router",
]
