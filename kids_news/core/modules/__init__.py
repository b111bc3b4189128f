# Article workflow
from .article_writer import ArticleWriter
from .paragraph_illustrator import ParagraphIllustrator

# Standalone capabilities
from .image_studio import ImageStudio
from .quick_chat import QuickChat

__all__ = [
    # Article workflow
    "ArticleWriter",
    "ParagraphIllustrator",
    # Standalone capabilities
    "ImageStudio",
    "QuickChat",
]
