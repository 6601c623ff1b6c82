"""
Dependency injection container.

Factory functions for FastAPI dependencies. Each application owns one
ServiceCache built from the Settings passed to create_app(), stored on
app.state and reached through the request.

Dependencies: visualsuite.configs, visualsuite.application, visualsuite.boundary
System role: DI container for service injection
"""

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from visualsuite.application.services import ArchiveService, VisualGenerationService
from visualsuite.boundary.db import build_async_engine, build_session_factory
from visualsuite.boundary.providers import ImageModelClient, TextModelClient
from visualsuite.configs import Settings


class ServiceCache:
    """Container for cached provider clients, services and the DB engine."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._text_client = None
        self._image_client = None
        self._generation_service = None
        self._engine = None
        self._session_factory = None

    @property
    def text_client(self) -> TextModelClient:
        """Get cached Gemini client."""
        if self._text_client is None:
            settings = self.settings.text_model
            self._text_client = TextModelClient(
                api_key=settings.api_key,
                model_name=settings.model,
                temperature=settings.temperature,
            )
        return self._text_client

    @property
    def image_client(self) -> ImageModelClient:
        """Get cached Hugging Face client."""
        if self._image_client is None:
            settings = self.settings.image_model
            self._image_client = ImageModelClient(
                api_key=settings.api_key,
                model_url=settings.model_url,
                timeout=settings.timeout_seconds,
            )
        return self._image_client

    @property
    def generation_service(self) -> VisualGenerationService:
        """Get cached generation service."""
        if self._generation_service is None:
            self._generation_service = VisualGenerationService(
                text_client=self.text_client,
                image_client=self.image_client,
            )
        return self._generation_service

    @property
    def engine(self) -> AsyncEngine:
        """Get cached async engine for the configured database."""
        if self._engine is None:
            self._engine = build_async_engine(self.settings.database)
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker:
        """Get cached session factory bound to the engine."""
        if self._session_factory is None:
            self._session_factory = build_session_factory(self.engine)
        return self._session_factory

    async def close(self) -> None:
        """Dispose the engine and clear all cached instances."""
        if self._engine is not None:
            await self._engine.dispose()
        self._text_client = None
        self._image_client = None
        self._generation_service = None
        self._engine = None
        self._session_factory = None


def get_service_cache(request: Request) -> ServiceCache:
    """Get the service cache of the application serving this request."""
    return request.app.state.service_cache


def get_generation_service(
    cache: ServiceCache = Depends(get_service_cache),
) -> VisualGenerationService:
    """
    Get generation service instance.

    Returns:
        VisualGenerationService: Service with cached provider clients
    """
    return cache.generation_service


async def get_async_db(
    cache: ServiceCache = Depends(get_service_cache),
) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection with automatic cleanup.

    Yields:
        AsyncSession: Async SQLAlchemy database session (scoped to request lifetime)
    """
    async with cache.session_factory() as session:
        yield session


def get_archive_service(db: AsyncSession = Depends(get_async_db)) -> ArchiveService:
    """
    Get archive service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        ArchiveService: Archive service bound to the request session
    """
    return ArchiveService(db=db)
