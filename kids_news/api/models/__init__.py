"""Pydantic models for API requests and responses."""

from .requests import CreateArticleRequest, GenerateImageRequest, ChatRequest
from .responses import (
    ArticleParagraphResponse,
    ArticleResponse,
    ImageResponse,
    ChatResponse,
)

__all__ = [
    "CreateArticleRequest",
    "GenerateImageRequest",
    "ChatRequest",
    "ArticleParagraphResponse",
    "ArticleResponse",
    "ImageResponse",
    "ChatResponse",
]
