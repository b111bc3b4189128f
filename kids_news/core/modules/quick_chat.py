"""Quick, single-turn fun-fact answers for kids."""

import logging
from typing import Optional

import dspy

from kids_news.config import CHAT_FALLBACK_ANSWER, require_api_key, get_quick_lm
from kids_news.config.chat import CHAT_SYSTEM_INSTRUCTION
from ..errors import GenerationError, ServiceError

logger = logging.getLogger(__name__)


class QuickChat:
    """
    Answer one question with a short, kid-friendly reply.

    Args:
        api_key: Gemini API key
        lm: Optional explicit LM (useful for testing). Built from api_key
            when not provided.
    """

    def __init__(self, api_key: Optional[str], lm: Optional[dspy.LM] = None):
        require_api_key(api_key)
        self.lm = lm or get_quick_lm(api_key)

    async def ask(self, question: str) -> str:
        """
        Get a quick answer.

        Returns:
            The model's answer, or a fixed fallback if it came back empty

        Raises:
            GenerationError: If the question is blank
            ServiceError: If the LM call fails
        """
        if not question or not question.strip():
            raise GenerationError("Please ask a question.")

        messages = [
            {"role": "system", "content": CHAT_SYSTEM_INSTRUCTION},
            {"role": "user", "content": question},
        ]

        try:
            outputs = await self.lm.acall(messages=messages)
        except Exception as e:
            logger.error(f"Error getting quick response: {e}")
            raise ServiceError(f"Failed to get quick response: {e}") from e

        answer = outputs[0] if outputs else ""
        if isinstance(answer, dict):
            answer = answer.get("text") or ""

        return (answer or "").strip() or CHAT_FALLBACK_ANSWER
