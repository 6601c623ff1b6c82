"""Hosted model provider adapters."""

from visualsuite.boundary.providers.image_model_client import (
    ImageModelClient,
    decode_data_uri,
    encode_data_uri,
)
from visualsuite.boundary.providers.text_model_client import TextModelClient

__all__ = [
    "ImageModelClient",
    "TextModelClient",
    "decode_data_uri",
    "encode_data_uri",
]
