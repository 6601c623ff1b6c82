"""Tests that create_app() wires the given Settings through every layer."""

import logging

import pytest
from fastapi.testclient import TestClient

from visualsuite.api.main import create_app
from visualsuite.configs.database import DatabaseSettings
from visualsuite.configs.providers import ImageModelSettings
from visualsuite.configs.settings import Settings


@pytest.fixture
def restore_root_logging():
    """Undo the handler and level changes made by the app lifespan."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sqlite_settings(tmp_path) -> Settings:
    return Settings(
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'archive.db'}"),
        image_model=ImageModelSettings(api_key=None),
        log_level="WARNING",
    )


ARCHIVE_BODY = {
    "prompt": "a red fox in snow",
    "image": "data:image/jpeg;base64,aGVsbG8=",
    "enhancedPrompt": "A majestic red fox in fresh snow",
    "mermaidCode": "graph TD\nA[Fox] --> B[Snow]",
    "style": "anime",
    "archivist": "Ada",
}


class TestProviderSettings:
    """Provider clients come from the Settings passed to create_app()."""

    def test_missing_image_key_wins_over_environment(self, monkeypatch) -> None:
        # Arrange
        monkeypatch.setenv("HUGGINGFACE_API_KEY", "env-key")
        app = create_app(settings=Settings(image_model=ImageModelSettings(api_key=None)))
        client = TestClient(app, raise_server_exceptions=False)

        # Act
        response = client.post("/generate", json={"prompt": "a red fox in snow"})

        # Assert
        assert response.status_code == 500
        assert response.json() == {"error": "HF Key missing"}
        assert app.state.service_cache.image_client.is_configured is False

    def test_model_url_comes_from_given_settings(self, monkeypatch) -> None:
        monkeypatch.setenv("HUGGINGFACE_MODEL_URL", "https://env.test/model")
        settings = Settings(
            image_model=ImageModelSettings(api_key="k", model_url="https://given.test/model")
        )

        app = create_app(settings=settings)

        assert app.state.settings is settings
        assert app.state.service_cache.image_client.model_url == "https://given.test/model"

    def test_applications_have_separate_caches(self) -> None:
        first = create_app(settings=Settings(image_model=ImageModelSettings(api_key="a")))
        second = create_app(settings=Settings(image_model=ImageModelSettings(api_key=None)))

        assert first.state.service_cache is not second.state.service_cache
        assert first.state.service_cache.image_client.is_configured is True
        assert second.state.service_cache.image_client.is_configured is False


class TestLifespanWithGivenSettings:
    """The lifespan uses the app's own database and log level."""

    def test_archive_round_trip_uses_given_database(
        self, monkeypatch, sqlite_settings, restore_root_logging
    ) -> None:
        """Tables are created on the configured SQLite file, not the env URL."""
        # Arrange
        monkeypatch.setenv("POSTGRES_URL", "postgresql+asyncpg://env-user:pw@unreachable/db")
        app = create_app(settings=sqlite_settings)

        # Act
        with TestClient(app) as client:
            created = client.post("/visuals", json=ARCHIVE_BODY)
            listed = client.get("/visuals")
            fetched = client.get(f"/visuals/{created.json()['id']}")
            engine_url = str(app.state.service_cache.engine.url)

        # Assert
        assert engine_url.startswith("sqlite+aiosqlite")
        assert created.status_code == 201
        assert [item["id"] for item in listed.json()] == [created.json()["id"]]
        assert fetched.json()["archivist"] == "Ada"

    def test_created_at_is_reported_in_utc(self, sqlite_settings, restore_root_logging) -> None:
        app = create_app(settings=sqlite_settings)

        with TestClient(app) as client:
            created = client.post("/visuals", json=ARCHIVE_BODY).json()
            listed = client.get("/visuals").json()

        assert created["createdAt"].endswith(("Z", "+00:00"))
        assert listed[0]["createdAt"].endswith(("Z", "+00:00"))

    def test_log_level_comes_from_given_settings(self, sqlite_settings, restore_root_logging) -> None:
        app = create_app(settings=sqlite_settings)

        with TestClient(app):
            level = logging.getLogger().level

        assert level == logging.WARNING
