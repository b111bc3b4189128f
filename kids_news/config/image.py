"""
Image generation configuration for the Kids News Generator.

Two Gemini image models are used:
- Nano Banana (Gemini 2.5 Flash Image) for article illustrations and edits
- Nano Banana Pro (Gemini 3 Pro Image) for standalone studio images, which
  supports resolution tiers
"""

from typing import Optional

from google.genai.types import GenerateContentConfig, ImageConfig, Modality

from ..core.types import ImageSize, InlineImage

# Image generation constants
IMAGE_CONSTANTS = {
    "article_model": "gemini-2.5-flash-image",  # Nano Banana
    "studio_model": "gemini-3-pro-image-preview",  # Nano Banana Pro
    "edit_model": "gemini-2.5-flash-image",
    "aspect_ratio": "1:1",  # Square images everywhere
}

# Placeholder shown when the image request itself fails
FAILURE_PLACEHOLDER_URL = "https://picsum.photos/400/400?grayscale"

# Placeholder shown when the request succeeds but carries no image part
MISSING_IMAGE_PLACEHOLDER_URL = "https://picsum.photos/400/400?blur=2"


def get_article_image_config() -> GenerateContentConfig:
    """Config for per-paragraph article illustrations (square, default size)."""
    return GenerateContentConfig(
        response_modalities=[Modality.TEXT, Modality.IMAGE],
        image_config=ImageConfig(aspect_ratio=IMAGE_CONSTANTS["aspect_ratio"]),
    )


def get_studio_image_config(size: ImageSize) -> GenerateContentConfig:
    """Config for standalone image generation at a resolution tier."""
    return GenerateContentConfig(
        response_modalities=[Modality.TEXT, Modality.IMAGE],
        image_config=ImageConfig(
            aspect_ratio=IMAGE_CONSTANTS["aspect_ratio"],
            image_size=size.value,
        ),
    )


def get_edit_image_config() -> GenerateContentConfig:
    """Config for image edits. Aspect ratio follows the input image."""
    return GenerateContentConfig(
        response_modalities=[Modality.TEXT, Modality.IMAGE],
    )


def find_inline_image(response) -> Optional[InlineImage]:
    """
    Find the first inline image in a Gemini API response.

    Args:
        response: The response from genai.Client.models.generate_content()

    Returns:
        InlineImage, or None if the response carries no image part
    """
    import base64

    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None

    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []

    for part in parts:
        inline_data = getattr(part, "inline_data", None)
        if inline_data and inline_data.data:
            data = inline_data.data
            data = base64.b64decode(data) if isinstance(data, str) else data
            return InlineImage(data=data, mime_type=inline_data.mime_type or "image/png")

    return None


def build_paragraph_image_prompt(paragraph: str) -> str:
    """Build the illustration prompt for one article paragraph."""
    return (
        f'Generate a 3D, cartoon-style, funny image related to this text for kids: "{paragraph}". '
        "Focus on bright colors, engaging characters, and a light-hearted mood."
    )


def build_studio_image_prompt(prompt: str) -> str:
    """Wrap a user prompt for standalone studio generation."""
    return (
        f'Generate a vibrant, high-quality, cartoon-style image for kids based on: "{prompt}". '
        "Ensure it is visually appealing and child-friendly."
    )


def build_edit_prompt(instruction: str) -> str:
    """Wrap a user edit instruction."""
    return f"Edit this image for kids in a funny, cartoon style: {instruction}"
