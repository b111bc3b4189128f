"""Errors raised by the article, image studio and quick chat generators."""

from typing import Optional


class GenerationError(Exception):
    """Base class for generation failures. Also raised directly for invalid input."""


class ConfigurationError(GenerationError):
    """The Gemini credential is missing. Never retried."""


class ServiceError(GenerationError):
    """A remote Gemini call failed (transport or service error)."""


class FormatError(GenerationError):
    """The article text could not be turned into enough paragraphs."""

    def __init__(self, message: str, raw_response: Optional[str] = None):
        super().__init__(message)
        self.raw_response = raw_response
