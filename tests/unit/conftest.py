"""Shared fixtures for unit tests: fake Gemini clients and responses."""

import json
from io import BytesIO
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.genai import types
from PIL import Image

TEST_API_KEY = "test-google-api-key"

PNG_BYTES_SIZE = (4, 4)


def make_png_bytes(color: str = "red") -> bytes:
    """Create a tiny valid PNG."""
    buffer = BytesIO()
    Image.new("RGB", PNG_BYTES_SIZE, color=color).save(buffer, format="PNG")
    return buffer.getvalue()


def make_text_response(text):
    """A Gemini response whose .text is the given string (or None)."""
    response = MagicMock()
    response.text = text
    return response


def make_paragraphs_json(count: int, prefix: str = "Paragraph") -> str:
    """JSON array of {"paragraph": ...} objects."""
    return json.dumps([{"paragraph": f"{prefix} {i}"} for i in range(1, count + 1)])


def make_image_response(data: bytes = b"fake-image-bytes", mime_type: str = "image/png"):
    """A real GenerateContentResponse with one text part and one inline image part."""
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(
                    role="model",
                    parts=[
                        types.Part(text="Here is your picture!"),
                        types.Part(inline_data=types.Blob(data=data, mime_type=mime_type)),
                    ],
                )
            )
        ]
    )


def make_empty_image_response():
    """A GenerateContentResponse that carries only text, no image."""
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(role="model", parts=[types.Part(text="I can't draw that.")])
            )
        ]
    )


def make_client(*responses) -> MagicMock:
    """
    Fake genai.Client whose aio generate_content returns/raises the given
    items in order (exceptions are raised).
    """
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(side_effect=list(responses))
    return client


@pytest.fixture
def png_bytes():
    return make_png_bytes()


@pytest.fixture
def api_key():
    return TEST_API_KEY
