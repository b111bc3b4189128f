"""Kids News Generator: illustrated, kid-friendly news articles from Gemini."""

__version__ = "0.1.0"
