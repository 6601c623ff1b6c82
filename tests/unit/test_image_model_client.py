"""Unit tests for ImageModelClient and data URI helpers."""

import json

import httpx
import pytest

from visualsuite.boundary.providers.image_model_client import (
    ImageModelClient,
    decode_data_uri,
    encode_data_uri,
)
from visualsuite.core.exceptions import ImageCredentialMissingError, UpstreamModelError

MODEL_URL = "https://hf.test/models/flux"
IMAGE_BYTES = b"\xff\xd8\xff\xe0fake-jpeg"


def make_client(recording_transport, handler, api_key="hf_token"):
    transport = recording_transport(handler)
    http_client = httpx.AsyncClient(transport=transport)
    return ImageModelClient(api_key=api_key, model_url=MODEL_URL, http_client=http_client), transport


class TestGenerateDataUri:
    """Tests for ImageModelClient.generate_data_uri()."""

    @pytest.mark.asyncio
    async def test_success_returns_data_uri(self, recording_transport) -> None:
        """Should post inputs with bearer auth and encode the bytes."""
        # Arrange
        client, transport = make_client(
            recording_transport,
            lambda request: httpx.Response(200, content=IMAGE_BYTES, headers={"content-type": "image/jpeg"}),
        )

        # Act
        result = await client.generate_data_uri("A majestic red fox")

        # Assert
        assert result == encode_data_uri(IMAGE_BYTES, "image/jpeg")
        request = transport.requests[0]
        assert str(request.url) == MODEL_URL
        assert request.headers["Authorization"] == "Bearer hf_token"
        assert json.loads(request.content) == {"inputs": "A majestic red fox"}

    @pytest.mark.asyncio
    async def test_uses_image_content_type(self, recording_transport) -> None:
        client, _ = make_client(
            recording_transport,
            lambda request: httpx.Response(200, content=b"png", headers={"content-type": "image/png"}),
        )

        result = await client.generate_data_uri("prompt")

        assert result.startswith("data:image/png;base64,")

    @pytest.mark.asyncio
    async def test_defaults_to_jpeg_for_non_image_content_type(self, recording_transport) -> None:
        client, _ = make_client(
            recording_transport,
            lambda request: httpx.Response(
                200, content=b"raw", headers={"content-type": "application/octet-stream"}
            ),
        )

        result = await client.generate_data_uri("prompt")

        assert result.startswith("data:image/jpeg;base64,")

    @pytest.mark.asyncio
    async def test_error_status_carries_upstream_details(self, recording_transport) -> None:
        client, _ = make_client(
            recording_transport,
            lambda request: httpx.Response(503, json={"error": "Model is loading"}),
        )

        with pytest.raises(UpstreamModelError) as exc_info:
            await client.generate_data_uri("prompt")

        error = exc_info.value
        assert error.message == "HF API failed"
        assert error.status_code == 503
        assert error.upstream_details == {"error": "Model is loading"}

    @pytest.mark.asyncio
    async def test_non_json_error_body_gives_empty_details(self, recording_transport) -> None:
        client, _ = make_client(
            recording_transport,
            lambda request: httpx.Response(502, text="<html>bad gateway</html>"),
        )

        with pytest.raises(UpstreamModelError) as exc_info:
            await client.generate_data_uri("prompt")

        assert exc_info.value.status_code == 502
        assert exc_info.value.upstream_details == {}

    @pytest.mark.asyncio
    async def test_transport_error_is_wrapped(self, recording_transport) -> None:
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = make_client(recording_transport, handler)

        with pytest.raises(UpstreamModelError) as exc_info:
            await client.generate_data_uri("prompt")

        assert exc_info.value.provider == "huggingface"
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_missing_key_makes_no_request(self, recording_transport) -> None:
        """Missing credential fails before any network call."""
        client, transport = make_client(
            recording_transport,
            lambda request: httpx.Response(200, content=IMAGE_BYTES),
            api_key=None,
        )

        assert client.is_configured is False
        with pytest.raises(ImageCredentialMissingError):
            await client.generate_data_uri("prompt")
        assert transport.requests == []


class TestDataUriHelpers:
    """Tests for encode_data_uri() and decode_data_uri()."""

    def test_decode_returns_bytes_and_mime(self) -> None:
        data, mime_type = decode_data_uri(encode_data_uri(IMAGE_BYTES, "image/webp"))
        assert data == IMAGE_BYTES
        assert mime_type == "image/webp"

    @pytest.mark.parametrize(
        "value",
        ["", "not a uri", "data:image/png,plain-text", "data:image/png;base64"],
    )
    def test_decode_rejects_invalid_input(self, value: str) -> None:
        with pytest.raises(ValueError):
            decode_data_uri(value)
