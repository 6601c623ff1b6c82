"""Tests for liveness and health endpoints."""

from visualsuite.api.routers.health import LIVENESS_TEXT


class TestHealthEndpoints:
    """Tests for GET / and GET /health."""

    def test_liveness_plain_text(self, make_client) -> None:
        response = make_client().get("/")

        assert response.status_code == 200
        assert response.text == LIVENESS_TEXT == "TextToVisual AI Suite is running!"
        assert response.headers["content-type"].startswith("text/plain")

    def test_health_json(self, make_client) -> None:
        response = make_client().get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "message": "Server Healthy"}

    def test_cors_allows_any_origin(self, make_client) -> None:
        response = make_client().get("/", headers={"Origin": "http://localhost:5173"})

        assert response.headers["access-control-allow-origin"] == "*"
