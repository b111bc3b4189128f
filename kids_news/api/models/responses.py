"""Pydantic models for API responses."""

from typing import Optional

from pydantic import BaseModel

from ...core.types import ArticleResult, ImageResult, ImageSize, ImageStatus


class ArticleParagraphResponse(BaseModel):
    """One paragraph of the article with its illustration."""

    text: str
    image_url: str  # data: URI, or a placeholder URL
    image_status: ImageStatus = ImageStatus.GENERATED


class ArticleResponse(BaseModel):
    """A complete illustrated article."""

    topic: str
    paragraphs: list[ArticleParagraphResponse]
    placeholder_count: int = 0

    @classmethod
    def from_result(cls, result: ArticleResult) -> "ArticleResponse":
        return cls(
            topic=result.topic,
            paragraphs=[
                ArticleParagraphResponse(
                    text=p.text,
                    image_url=p.image_reference,
                    image_status=p.image_status,
                )
                for p in result.paragraphs
            ],
            placeholder_count=result.placeholder_count,
        )


class ImageResponse(BaseModel):
    """A generated or edited image."""

    url: str
    prompt: str
    size: Optional[ImageSize] = None

    @classmethod
    def from_result(cls, result: ImageResult) -> "ImageResponse":
        return cls(url=result.url, prompt=result.prompt, size=result.size)


class ChatResponse(BaseModel):
    """Answer to a quick chat question."""

    answer: str
