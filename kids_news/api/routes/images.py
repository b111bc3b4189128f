"""Image studio endpoints: generate and edit."""

from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status

from ...core.types import InlineImage
from ..dependencies import Studio
from ..models.requests import GenerateImageRequest
from ..models.responses import ImageResponse

router = APIRouter()


@router.post(
    "/",
    response_model=ImageResponse,
    summary="Generate an image",
    description="Generate one square cartoon image for kids at the requested resolution tier.",
)
async def generate_image(request: GenerateImageRequest, studio: Studio):
    """Generate a standalone image."""
    result = await studio.generate(request.prompt, size=request.size)
    return ImageResponse.from_result(result)


@router.post(
    "/edit",
    response_model=ImageResponse,
    summary="Edit an image",
    description="Upload an image and describe a change; returns the edited image.",
)
async def edit_image(
    studio: Studio,
    file: UploadFile = File(..., description="Image to edit"),
    instruction: str = Form(..., min_length=1, description="How to change the image"),
):
    """Edit an uploaded image."""
    data = await file.read()

    # The declared content type is not trusted; the bytes decide
    try:
        image = InlineImage.from_bytes(data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Uploaded file is not a supported image: {e}",
        )

    result = await studio.edit(image, instruction)
    return ImageResponse.from_result(result)
