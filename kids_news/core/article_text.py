"""
Turn the raw article text response into paragraph drafts.

Two separate paths:
- decode_paragraphs: strict JSON decode of the structured output
- split_paragraph_lines: line-based fallback, used only when the strict
  decode fails
"""

import json
import logging

from .errors import FormatError
from .types import ParagraphDraft
from ..config.article import MIN_PARAGRAPHS

logger = logging.getLogger(__name__)


def decode_paragraphs(raw: str, min_paragraphs: int = MIN_PARAGRAPHS) -> list[ParagraphDraft]:
    """
    Decode a JSON array of {"paragraph": str} objects.

    Raises:
        FormatError: If the text is not valid JSON of that shape, or has
            fewer than min_paragraphs entries
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise FormatError(f"Article text is not valid JSON: {e}", raw_response=raw) from e

    if not isinstance(data, list):
        raise FormatError("Article text is not a JSON array.", raw_response=raw)

    drafts = []
    for item in data:
        if not isinstance(item, dict) or not isinstance(item.get("paragraph"), str):
            raise FormatError(
                "Article text entries must be objects with a 'paragraph' string.",
                raw_response=raw,
            )
        drafts.append(ParagraphDraft(paragraph=item["paragraph"]))

    if len(drafts) < min_paragraphs:
        raise FormatError(
            f"Generated article does not contain at least {min_paragraphs} paragraphs "
            "or is not in the expected format.",
            raw_response=raw,
        )

    return drafts


def split_paragraph_lines(raw: str) -> list[ParagraphDraft]:
    """Treat every non-empty line of the raw response as one paragraph, unchanged."""
    return [
        ParagraphDraft(paragraph=line)
        for line in raw.split("\n")
        if line.strip()
    ]


def parse_article_text(raw: str, min_paragraphs: int = MIN_PARAGRAPHS) -> list[ParagraphDraft]:
    """
    Strict decode, falling back to line splitting once.

    Raises:
        FormatError: If neither path yields min_paragraphs paragraphs
    """
    try:
        return decode_paragraphs(raw, min_paragraphs=min_paragraphs)
    except FormatError as e:
        logger.error(f"Error parsing article JSON, falling back to line split: {e}")

    drafts = split_paragraph_lines(raw)
    if len(drafts) < min_paragraphs:
        raise FormatError(
            f"Failed to parse article text or generate enough paragraphs. Raw response: {raw}",
            raw_response=raw,
        )
    return drafts
