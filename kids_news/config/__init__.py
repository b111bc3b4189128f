"""
Configuration module for the Kids News Generator.

Re-exports all configuration for convenience.
"""

from .credentials import API_KEY_ENV_VAR, get_api_key, require_api_key, get_genai_client
from .article import (
    ARTICLE_CONSTANTS,
    MIN_PARAGRAPHS,
    get_article_text_model,
    get_article_text_config,
    build_article_prompt,
)
from .image import (
    IMAGE_CONSTANTS,
    FAILURE_PLACEHOLDER_URL,
    MISSING_IMAGE_PLACEHOLDER_URL,
    get_article_image_config,
    get_studio_image_config,
    get_edit_image_config,
    find_inline_image,
)
from .chat import CHAT_CONSTANTS, CHAT_FALLBACK_ANSWER, get_quick_lm

__all__ = [
    # Credentials
    "API_KEY_ENV_VAR",
    "get_api_key",
    "require_api_key",
    "get_genai_client",
    # Article
    "ARTICLE_CONSTANTS",
    "MIN_PARAGRAPHS",
    "get_article_text_model",
    "get_article_text_config",
    "build_article_prompt",
    # Image
    "IMAGE_CONSTANTS",
    "FAILURE_PLACEHOLDER_URL",
    "MISSING_IMAGE_PLACEHOLDER_URL",
    "get_article_image_config",
    "get_studio_image_config",
    "get_edit_image_config",
    "find_inline_image",
    # Chat
    "CHAT_CONSTANTS",
    "CHAT_FALLBACK_ANSWER",
    "get_quick_lm",
]
