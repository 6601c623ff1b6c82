"""API-specific dependencies."""

from .dependencies import (
    ServiceCache,
    get_archive_service,
    get_async_db,
    get_generation_service,
    get_service_cache,
)

__all__ = [
    "ServiceCache",
    "get_archive_service",
    "get_async_db",
    "get_generation_service",
    "get_service_cache",
]
