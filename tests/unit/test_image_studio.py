"""Unit tests for ImageStudio (standalone generate and edit)."""

import pytest
from google.genai import types

from kids_news.core.errors import ConfigurationError, GenerationError, ServiceError
from kids_news.core.modules.image_studio import ImageStudio
from kids_news.core.types import ImageSize, InlineImage
from tests.unit.conftest import (
    TEST_API_KEY,
    make_client,
    make_empty_image_response,
    make_image_response,
)


class TestImageStudioConfiguration:

    def test_missing_key_raises(self):
        client = make_client()
        with pytest.raises(ConfigurationError):
            ImageStudio(api_key=None, client=client)
        client.aio.models.generate_content.assert_not_called()


class TestGenerate:
    """Tests for ImageStudio.generate."""

    @pytest.mark.asyncio
    async def test_returns_data_uri_result(self):
        client = make_client(make_image_response(b"jpeg-bytes", "image/jpeg"))
        studio = ImageStudio(api_key=TEST_API_KEY, client=client)

        result = await studio.generate("a dragon eating spaghetti", size=ImageSize.TWO_K)

        assert result.url.startswith("data:image/jpeg;base64,")
        assert result.prompt == "a dragon eating spaghetti"
        assert result.size == ImageSize.TWO_K

    @pytest.mark.asyncio
    @pytest.mark.parametrize("size", list(ImageSize))
    async def test_passes_resolution_tier(self, size):
        client = make_client(make_image_response())
        studio = ImageStudio(api_key=TEST_API_KEY, client=client)

        await studio.generate("a rocket", size=size)

        kwargs = client.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-3-pro-image-preview"
        assert kwargs["config"].image_config.image_size == size.value
        assert kwargs["config"].image_config.aspect_ratio == "1:1"

    @pytest.mark.asyncio
    async def test_default_size_is_1k(self):
        client = make_client(make_image_response())
        studio = ImageStudio(api_key=TEST_API_KEY, client=client)

        result = await studio.generate("a rocket")

        assert result.size == ImageSize.ONE_K

    @pytest.mark.asyncio
    async def test_missing_image_is_service_error(self):
        client = make_client(make_empty_image_response())
        studio = ImageStudio(api_key=TEST_API_KEY, client=client)

        with pytest.raises(ServiceError, match="Failed to generate image: No image data found"):
            await studio.generate("a rocket")

    @pytest.mark.asyncio
    async def test_transport_failure_is_service_error(self):
        client = make_client(ConnectionError("Network unreachable"))
        studio = ImageStudio(api_key=TEST_API_KEY, client=client)

        with pytest.raises(ServiceError, match="Network unreachable"):
            await studio.generate("a rocket")

        assert client.aio.models.generate_content.await_count == 1

    @pytest.mark.asyncio
    async def test_blank_prompt_rejected(self):
        client = make_client()
        studio = ImageStudio(api_key=TEST_API_KEY, client=client)

        with pytest.raises(GenerationError):
            await studio.generate("  ")

        client.aio.models.generate_content.assert_not_called()


class TestEdit:
    """Tests for ImageStudio.edit."""

    @pytest.mark.asyncio
    async def test_sends_image_and_instruction(self, png_bytes):
        client = make_client(make_image_response(b"edited", "image/png"))
        studio = ImageStudio(api_key=TEST_API_KEY, client=client)
        original = InlineImage(data=png_bytes, mime_type="image/png")

        result = await studio.edit(original, "add a party hat")

        kwargs = client.aio.models.generate_content.call_args.kwargs
        image_part, text = kwargs["contents"]
        assert kwargs["model"] == "gemini-2.5-flash-image"
        assert isinstance(image_part, types.Part)
        assert image_part.inline_data.data == png_bytes
        assert image_part.inline_data.mime_type == "image/png"
        assert text == "Edit this image for kids in a funny, cartoon style: add a party hat"
        assert InlineImage.from_data_uri(result.url).data == b"edited"
        assert result.prompt == "add a party hat"
        assert result.size is None

    @pytest.mark.asyncio
    async def test_missing_edited_image_is_service_error(self, png_bytes):
        client = make_client(make_empty_image_response())
        studio = ImageStudio(api_key=TEST_API_KEY, client=client)

        with pytest.raises(ServiceError, match="Failed to edit image: No edited image data"):
            await studio.edit(InlineImage(data=png_bytes, mime_type="image/png"), "add a hat")

    @pytest.mark.asyncio
    async def test_blank_instruction_rejected(self, png_bytes):
        client = make_client()
        studio = ImageStudio(api_key=TEST_API_KEY, client=client)

        with pytest.raises(GenerationError):
            await studio.edit(InlineImage(data=png_bytes, mime_type="image/png"), "")

        client.aio.models.generate_content.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_image_rejected(self):
        client = make_client()
        studio = ImageStudio(api_key=TEST_API_KEY, client=client)

        with pytest.raises(GenerationError, match="upload an image"):
            await studio.edit(InlineImage(data=b"", mime_type="image/png"), "add a hat")
