from .article_generator import ArticleGenerator

__all__ = ["ArticleGenerator"]
