"""FastAPI dependency injection for the generators."""

from typing import Annotated

from dotenv import find_dotenv, load_dotenv
from fastapi import Depends

# Load .env from project root (find_dotenv searches parent directories)
load_dotenv(find_dotenv())

from ..config import get_api_key  # noqa: E402
from ..core.modules.image_studio import ImageStudio  # noqa: E402
from ..core.modules.quick_chat import QuickChat  # noqa: E402
from ..core.programs.article_generator import ArticleGenerator  # noqa: E402


# Each request gets fresh components; a missing key raises ConfigurationError here
def get_article_generator() -> ArticleGenerator:
    """Get an ArticleGenerator for the configured API key."""
    return ArticleGenerator(api_key=get_api_key())


def get_image_studio() -> ImageStudio:
    """Get an ImageStudio for the configured API key."""
    return ImageStudio(api_key=get_api_key())


def get_quick_chat() -> QuickChat:
    """Get a QuickChat for the configured API key."""
    return QuickChat(api_key=get_api_key())


# Type aliases for cleaner route signatures
Generator = Annotated[ArticleGenerator, Depends(get_article_generator)]
Studio = Annotated[ImageStudio, Depends(get_image_studio)]
Chat = Annotated[QuickChat, Depends(get_quick_chat)]
