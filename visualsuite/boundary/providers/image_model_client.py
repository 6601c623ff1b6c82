"""
Hugging Face image-generation client.

Posts the enhanced prompt to a hosted inference endpoint, receives raw image
bytes and re-encodes them as a base64 data URI. Unlike the text path there is
no substitute value: a missing credential or an upstream error fails the call.

Dependencies: httpx, base64
System role: Boundary adapter for the hosted image model
"""

import base64
import logging
from typing import Any

import httpx

from visualsuite.core.exceptions import ImageCredentialMissingError, UpstreamModelError

logger = logging.getLogger(__name__)

PROVIDER = "huggingface"
DEFAULT_MIME_TYPE = "image/jpeg"


def encode_data_uri(data: bytes, mime_type: str = DEFAULT_MIME_TYPE) -> str:
    """Encode raw bytes as a base64 data URI."""
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def decode_data_uri(uri: str) -> tuple[bytes, str]:
    """
    Decode a base64 data URI.

    Args:
        uri: String of the form data:<mime>;base64,<payload>

    Returns:
        tuple[bytes, str]: Decoded payload and MIME type

    Raises:
        ValueError: If the string is not a base64 data URI
    """
    if not uri.startswith("data:") or "," not in uri:
        raise ValueError("Not a data URI")
    header, payload = uri[5:].split(",", 1)
    if not header.endswith(";base64"):
        raise ValueError("Data URI is not base64-encoded")
    mime_type = header[: -len(";base64")] or DEFAULT_MIME_TYPE
    return base64.b64decode(payload), mime_type


def _error_body(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {"body": body}


class ImageModelClient:
    """Async client for a Hugging Face text-to-image inference endpoint."""

    def __init__(
        self,
        api_key: str | None,
        model_url: str,
        timeout: float = 120.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize client.

        Args:
            api_key: Hugging Face API token (None disables the client)
            model_url: Inference endpoint URL
            timeout: Request timeout in seconds
            http_client: Shared AsyncClient; one is created per call when None
        """
        self.model_url = model_url
        self.timeout = timeout
        self._api_key = api_key
        self._http_client = http_client

    @property
    def is_configured(self) -> bool:
        """Whether an API credential is available."""
        return bool(self._api_key)

    async def generate_data_uri(self, prompt: str) -> str:
        """Generate an image and return it as a data URI.

        Args:
            prompt: Enhanced prompt text

        Returns:
            str: data:<mime>;base64,<payload>

        Raises:
            ImageCredentialMissingError: No API key configured (no request made)
            UpstreamModelError: Transport failure or non-success status
        """
        if not self.is_configured:
            raise ImageCredentialMissingError(provider=PROVIDER)

        logger.info(f"{__name__}:generate_data_uri - START prompt_len={len(prompt)}")
        response = await self._post(prompt)

        if not response.is_success:
            details = _error_body(response)
            logger.error(
                f"{__name__}:generate_data_uri - upstream status={response.status_code} "
                f"details={details}"
            )
            raise UpstreamModelError(
                "HF API failed",
                provider=PROVIDER,
                status_code=response.status_code,
                details=details,
            )

        content_type = response.headers.get("content-type", "").split(";")[0].strip()
        mime_type = content_type if content_type.startswith("image/") else DEFAULT_MIME_TYPE
        data_uri = encode_data_uri(response.content, mime_type)

        logger.info(
            f"{__name__}:generate_data_uri - END bytes={len(response.content)}, mime_type={mime_type}"
        )
        return data_uri

    async def _post(self, prompt: str) -> httpx.Response:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        payload = {"inputs": prompt}
        try:
            if self._http_client is not None:
                return await self._http_client.post(
                    self.model_url, headers=headers, json=payload, timeout=self.timeout
                )
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                return await client.post(self.model_url, headers=headers, json=payload)
        except httpx.HTTPError as e:
            raise UpstreamModelError(
                f"HF request failed: {type(e).__name__}: {e}",
                provider=PROVIDER,
            ) from e
