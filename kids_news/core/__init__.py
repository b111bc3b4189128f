# Kids News Generator - Core Domain

# Re-export types and errors for convenient access
from .errors import GenerationError, ConfigurationError, ServiceError, FormatError
from .types import (
    ImageSize,
    ImageStatus,
    InlineImage,
    ImageResult,
    ParagraphDraft,
    ArticleParagraph,
    ArticleResult,
)

__all__ = [
    "GenerationError",
    "ConfigurationError",
    "ServiceError",
    "FormatError",
    "ImageSize",
    "ImageStatus",
    "InlineImage",
    "ImageResult",
    "ParagraphDraft",
    "ArticleParagraph",
    "ArticleResult",
]
