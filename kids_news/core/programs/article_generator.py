"""
Main program for generating illustrated kids' news articles.

Workflow:
1. Check the credential and the topic
2. Write the article text (one structured-output call, all-or-nothing)
3. Illustrate each paragraph in order (best-effort, placeholders on failure)

Each call is independent: nothing is cached or shared between articles.
"""

import time
from typing import Optional

from google import genai

from kids_news.config import require_api_key, get_genai_client
from kids_news.logging import article_logger
from ..errors import GenerationError
from ..types import ArticleResult
from ..modules.article_writer import ArticleWriter
from ..modules.paragraph_illustrator import ParagraphIllustrator


class ArticleGenerator:
    """
    Complete article pipeline: text phase followed by image phase.

    Args:
        api_key: Gemini API key. Missing or blank raises ConfigurationError
            before any client is built.
        client: Optional explicit Gemini client. Useful for testing.
    """

    def __init__(self, api_key: Optional[str], client: Optional[genai.Client] = None):
        require_api_key(api_key)
        self.client = client or get_genai_client(api_key)
        self.writer = ArticleWriter(self.client)
        self.illustrator = ParagraphIllustrator(self.client)

    async def generate(self, topic: str) -> ArticleResult:
        """
        Generate an illustrated article for a topic.

        Args:
            topic: The news topic (e.g. "a giant cookie was baked")

        Returns:
            ArticleResult with one paragraph per written paragraph, each
            carrying a real or placeholder image reference

        Raises:
            GenerationError: If the topic is blank
            ServiceError: If the text call fails
            FormatError: If the text has too few paragraphs
        """
        topic = (topic or "").strip()
        if not topic:
            raise GenerationError("Please enter a topic for the news article.")

        start_time = time.monotonic()
        article_logger.generation_started(topic)

        try:
            drafts = await self.writer.write(topic)
        except GenerationError as e:
            article_logger.generation_failed(topic, e, stage="text")
            raise

        article_logger.stage_completed(topic, "text", time.monotonic() - start_time)

        paragraphs = await self.illustrator.illustrate_article(drafts, topic=topic)

        article_logger.generation_completed(topic, time.monotonic() - start_time)
        return ArticleResult(topic=topic, paragraphs=tuple(paragraphs))
