"""
Credential handling for the Gemini-backed generators.

The API key is looked up once at the edges (API dependency, CLI entry points)
and then passed explicitly to every component that talks to Gemini.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from google import genai

from ..core.errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()

API_KEY_ENV_VAR = "GOOGLE_API_KEY"


def get_api_key() -> Optional[str]:
    """Read the Gemini API key from the environment (None if unset)."""
    return os.getenv(API_KEY_ENV_VAR)


def require_api_key(api_key: Optional[str]) -> str:
    """
    Return the API key, or raise if it is missing.

    Raises:
        ConfigurationError: If api_key is None or blank
    """
    if not api_key or not api_key.strip():
        raise ConfigurationError(
            f"{API_KEY_ENV_VAR} environment variable is not set. Please configure your API key."
        )
    return api_key


def get_genai_client(api_key: Optional[str]) -> genai.Client:
    """Build a Gemini client for the given key."""
    return genai.Client(api_key=require_api_key(api_key))
