"""
Standalone image generation and editing.

Single requests only: no batching, no placeholder substitution. A failed
call or an empty response surfaces as a ServiceError.
"""

import logging
from typing import Optional

from google import genai
from google.genai import types

from kids_news.config import (
    IMAGE_CONSTANTS,
    require_api_key,
    get_genai_client,
    get_studio_image_config,
    get_edit_image_config,
    find_inline_image,
)
from kids_news.config.image import build_studio_image_prompt, build_edit_prompt
from ..errors import GenerationError, ServiceError
from ..types import ImageResult, ImageSize, InlineImage

logger = logging.getLogger(__name__)


class ImageStudio:
    """Generate a new kids' image from a prompt, or edit an existing one."""

    def __init__(self, api_key: Optional[str], client: Optional[genai.Client] = None):
        require_api_key(api_key)
        self.client = client or get_genai_client(api_key)

    async def generate(self, prompt: str, size: ImageSize = ImageSize.ONE_K) -> ImageResult:
        """
        Generate one square image at the given resolution tier.

        Raises:
            GenerationError: If the prompt is blank
            ServiceError: If the call fails or returns no image
        """
        if not prompt or not prompt.strip():
            raise GenerationError("Please enter a prompt for the image.")

        try:
            response = await self.client.aio.models.generate_content(
                model=IMAGE_CONSTANTS["studio_model"],
                contents=build_studio_image_prompt(prompt),
                config=get_studio_image_config(size),
            )
            image = find_inline_image(response)
            if image is None:
                raise ValueError("No image data found in the response.")
        except Exception as e:
            logger.error(f"Error generating image: {e}")
            raise ServiceError(f"Failed to generate image: {e}") from e

        return ImageResult(url=image.to_data_uri(), prompt=prompt, size=size)

    async def edit(self, image: InlineImage, instruction: str) -> ImageResult:
        """
        Edit an existing image following a text instruction.

        Raises:
            GenerationError: If the image is empty or the instruction is blank
            ServiceError: If the call fails or returns no image
        """
        if not image.data:
            raise GenerationError("Please upload an image to edit.")
        if not instruction or not instruction.strip():
            raise GenerationError("Please describe how to edit the image.")

        contents = [
            types.Part.from_bytes(data=image.data, mime_type=image.mime_type),
            build_edit_prompt(instruction),
        ]

        try:
            response = await self.client.aio.models.generate_content(
                model=IMAGE_CONSTANTS["edit_model"],
                contents=contents,
                config=get_edit_image_config(),
            )
            edited = find_inline_image(response)
            if edited is None:
                raise ValueError("No edited image data found in the response.")
        except Exception as e:
            logger.error(f"Error editing image: {e}")
            raise ServiceError(f"Failed to edit image: {e}") from e

        return ImageResult(url=edited.to_data_uri(), prompt=instruction)
