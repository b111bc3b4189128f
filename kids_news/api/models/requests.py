"""Pydantic models for API requests."""

from pydantic import BaseModel, Field

from ...core.types import ImageSize


class CreateArticleRequest(BaseModel):
    """Request body for generating an illustrated article."""

    topic: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Current event or theme for the kids' news article",
        examples=["a giant cookie was baked", "penguins learned to surf"],
    )


class GenerateImageRequest(BaseModel):
    """Request body for standalone image generation."""

    prompt: str = Field(
        ...,
        min_length=1,
        max_length=2000,
        description="What the image should show",
        examples=["a dragon eating spaghetti"],
    )
    size: ImageSize = Field(
        default=ImageSize.ONE_K,
        description="Resolution tier (1K, 2K or 4K)",
    )


class ChatRequest(BaseModel):
    """Request body for a quick chat question."""

    message: str = Field(
        ...,
        min_length=1,
        max_length=1000,
        description="The question to answer",
        examples=["Why is the sky blue?"],
    )
