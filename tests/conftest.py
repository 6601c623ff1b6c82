"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory archive database, provider client fakes, recording HTTP
transports and an application factory with an isolated rate limiter.
Dependencies: pytest, sqlalchemy, httpx, fastapi
System role: Test infrastructure and fixture management
"""

import uuid
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient

from visualsuite.api.deps import get_archive_service, get_generation_service
from visualsuite.api.main import create_app
from visualsuite.boundary.providers.image_model_client import ImageModelClient
from visualsuite.boundary.providers.text_model_client import TextModelClient
from visualsuite.configs.rate_limit import RateLimitSettings
from visualsuite.configs.settings import Settings
from visualsuite.core.rate_limiting import FixedWindowRateLimiter


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from visualsuite.boundary.db.base import Base

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def mock_text_client() -> MagicMock:
    """
    Create mock TextModelClient.

    Returns:
        MagicMock: Client whose async generate() returns canned text
    """
    client = MagicMock(spec=TextModelClient)
    client.generate = AsyncMock(return_value="A majestic red fox in fresh snow, anime style")
    return client


@pytest.fixture
def mock_image_client() -> MagicMock:
    """
    Create mock ImageModelClient with a configured credential.

    Returns:
        MagicMock: Client whose async generate_data_uri() returns a data URI
    """
    client = MagicMock(spec=ImageModelClient)
    client.is_configured = True
    client.generate_data_uri = AsyncMock(return_value="data:image/jpeg;base64,aGVsbG8=")
    return client


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request):
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


@pytest.fixture
def recording_transport():
    """Factory for RecordingTransport instances."""
    return RecordingTransport


@pytest.fixture
def sample_visual() -> SimpleNamespace:
    """Provide an archived visual shaped like a VisualModel row."""
    return SimpleNamespace(
        id=uuid.uuid4(),
        record_type="manifestation",
        prompt="a red fox in snow",
        image="data:image/jpeg;base64,aGVsbG8=",
        enhanced_prompt="A majestic red fox in fresh snow",
        mermaid_code="graph TD\nA[Fox] --> B[Snow]",
        style="anime",
        archivist="Ada",
        created_at=datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    )


@pytest.fixture
def make_client():
    """
    Build a TestClient around a fresh application.

    The lifespan is not entered, so no tables are created and no provider
    clients are warmed. Services are supplied through dependency overrides.
    """

    def _make(generation_service=None, archive_service=None, max_requests=1000, settings=None):
        settings = settings or Settings(rate_limit=RateLimitSettings(max_requests=max_requests))
        limiter = FixedWindowRateLimiter(
            window_seconds=settings.rate_limit.window_seconds,
            max_requests=settings.rate_limit.max_requests,
        )
        app = create_app(settings=settings, rate_limiter=limiter)
        if generation_service is not None:
            app.dependency_overrides[get_generation_service] = lambda: generation_service
        if archive_service is not None:
            app.dependency_overrides[get_archive_service] = lambda: archive_service
        return TestClient(app, raise_server_exceptions=False)

    return _make
