"""
Module for writing the article text with Gemini structured output.

One request per article: the model is asked for a JSON array of paragraph
objects, which is then decoded (with a line-split fallback) into drafts.
"""

import logging

from google import genai

from kids_news.config import get_article_text_model, get_article_text_config, build_article_prompt
from ..article_text import parse_article_text
from ..errors import FormatError, ServiceError
from ..types import ParagraphDraft

logger = logging.getLogger(__name__)


class ArticleWriter:
    """Write a kid-friendly news article as a list of paragraph drafts."""

    def __init__(self, client: genai.Client):
        self.client = client
        self.model = get_article_text_model()
        self.config = get_article_text_config()

    async def write(self, topic: str) -> list[ParagraphDraft]:
        """
        Generate the article text for a topic.

        Args:
            topic: The news topic, already validated as non-empty

        Returns:
            Paragraph drafts in the order the model wrote them

        Raises:
            ServiceError: If the Gemini call fails
            FormatError: If the response is empty or has too few paragraphs
        """
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=build_article_prompt(topic),
                config=self.config,
            )
        except Exception as e:
            logger.error(f"Error generating article text: {e}")
            raise ServiceError(
                f"Could not generate article text. Please try a different topic. {e}"
            ) from e

        raw = response.text
        if not raw:
            raise FormatError("Failed to get article text from Gemini API.")

        return parse_article_text(raw)
