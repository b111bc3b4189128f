"""
Integration tests for article, image and chat generation with real API calls.

Run with: pytest tests/integration -v
"""

from io import BytesIO

import pytest
from PIL import Image

from kids_news.config import MIN_PARAGRAPHS, get_api_key
from kids_news.core.modules.image_studio import ImageStudio
from kids_news.core.modules.quick_chat import QuickChat
from kids_news.core.programs.article_generator import ArticleGenerator
from kids_news.core.types import ImageSize, ImageStatus, InlineImage


@pytest.mark.requires_google_api
@pytest.mark.slow
class TestArticleGenerationReal:
    """Structural checks only: the model's content differs run to run."""

    @pytest.mark.asyncio
    async def test_generates_illustrated_article(self):
        generator = ArticleGenerator(api_key=get_api_key())

        result = await generator.generate("a giant cookie was baked")

        assert len(result) >= MIN_PARAGRAPHS
        for paragraph in result:
            assert paragraph.text.strip()
            assert paragraph.image_reference
            if paragraph.image_status == ImageStatus.GENERATED:
                image = InlineImage.from_data_uri(paragraph.image_reference)
                assert Image.open(BytesIO(image.data)).size[0] > 0


@pytest.mark.requires_google_api
@pytest.mark.slow
class TestImageStudioReal:

    @pytest.mark.asyncio
    async def test_generates_valid_image(self):
        studio = ImageStudio(api_key=get_api_key())

        result = await studio.generate("a simple red circle on a white background", size=ImageSize.ONE_K)

        image = InlineImage.from_data_uri(result.url)
        assert len(image.data) > 1000  # Real images are at least a few KB
        img = Image.open(BytesIO(image.data))
        assert img.size[0] == img.size[1]  # Square


@pytest.mark.requires_google_api
@pytest.mark.slow
class TestQuickChatReal:

    @pytest.mark.asyncio
    async def test_answers_question(self):
        chat = QuickChat(api_key=get_api_key())

        answer = await chat.ask("Why is the sky blue?")

        assert isinstance(answer, str)
        assert answer.strip()
