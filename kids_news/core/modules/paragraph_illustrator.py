"""
Module for illustrating article paragraphs using Nano Banana.

Each paragraph gets one square cartoon illustration. The batch is
best-effort: a paragraph whose image fails gets a placeholder, and the
remaining paragraphs are still illustrated.
"""

from typing import Optional

from google import genai

from kids_news.config import (
    IMAGE_CONSTANTS,
    FAILURE_PLACEHOLDER_URL,
    MISSING_IMAGE_PLACEHOLDER_URL,
    get_article_image_config,
    find_inline_image,
)
from kids_news.config.image import build_paragraph_image_prompt
from kids_news.logging import article_logger
from ..types import ArticleParagraph, ImageStatus, InlineImage, ParagraphDraft


class ParagraphIllustrator:
    """
    Generate one illustration per paragraph, sequentially.

    Paragraph i+1's request is only issued after paragraph i's has resolved.
    """

    def __init__(self, client: genai.Client):
        self.client = client
        self.model = IMAGE_CONSTANTS["article_model"]
        self.config = get_article_image_config()

    async def _generate_image(self, prompt: str) -> Optional[InlineImage]:
        """Request one image. Returns None if the response has no image part."""
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=self.config,
        )
        return find_inline_image(response)

    async def illustrate_paragraph(
        self,
        draft: ParagraphDraft,
        index: int = 0,
        topic: str = "",
    ) -> ArticleParagraph:
        """
        Illustrate a single paragraph, never raising on image failure.

        Args:
            draft: The paragraph to illustrate
            index: 1-based paragraph position, for logging
            topic: Article topic, for logging

        Returns:
            ArticleParagraph with a data URI, or a placeholder URL if the
            request failed or returned no image
        """
        prompt = build_paragraph_image_prompt(draft.paragraph)

        try:
            image = await self._generate_image(prompt)
        except Exception as e:
            article_logger.image_outcome(topic, index, ImageStatus.FAILED.value, error=e)
            return ArticleParagraph(
                text=draft.paragraph,
                image_reference=FAILURE_PLACEHOLDER_URL,
                image_status=ImageStatus.FAILED,
            )

        if image is None:
            article_logger.image_outcome(topic, index, ImageStatus.MISSING.value)
            return ArticleParagraph(
                text=draft.paragraph,
                image_reference=MISSING_IMAGE_PLACEHOLDER_URL,
                image_status=ImageStatus.MISSING,
            )

        article_logger.image_outcome(topic, index, ImageStatus.GENERATED.value)
        return ArticleParagraph(
            text=draft.paragraph,
            image_reference=image.to_data_uri(),
            image_status=ImageStatus.GENERATED,
        )

    async def illustrate_article(
        self,
        drafts: list[ParagraphDraft],
        topic: str = "",
    ) -> list[ArticleParagraph]:
        """
        Illustrate every paragraph in order.

        Returns:
            One ArticleParagraph per draft, same order, same length
        """
        paragraphs = []
        for i, draft in enumerate(drafts, start=1):
            paragraphs.append(await self.illustrate_paragraph(draft, index=i, topic=topic))
        return paragraphs
