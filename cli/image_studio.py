#!/usr/bin/env python3
"""
CLI for the image studio: generate a new kids' image or edit an existing one.

Usage:
    python cli/image_studio.py generate "a dragon eating spaghetti" --size 2K
    python cli/image_studio.py edit photo.jpg "give the dog a party hat"
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from kids_news.config import get_api_key
from kids_news.core.errors import GenerationError
from kids_news.core.modules.image_studio import ImageStudio
from kids_news.core.types import ImageResult, ImageSize, InlineImage
from kids_news.logging import configure_logging, use_json_logs


def write_image(result: ImageResult, output: str) -> Path:
    """Decode the result's data URI and write it, adding the right suffix if missing."""
    image = InlineImage.from_data_uri(result.url)
    path = Path(output)
    if not path.suffix:
        path = path.with_suffix(image.extension)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(image.data)
    return path


async def run(args: argparse.Namespace) -> ImageResult:
    studio = ImageStudio(api_key=get_api_key())
    if args.command == "generate":
        return await studio.generate(args.prompt, size=ImageSize(args.size))

    try:
        image = InlineImage.from_file(args.image)
    except (OSError, ValueError) as e:
        raise GenerationError(f"Could not read image {args.image}: {e}") from e
    return await studio.edit(image, args.instruction)


def main():
    parser = argparse.ArgumentParser(description="Generate or edit cartoon images for kids")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate a new image from a prompt")
    generate.add_argument("prompt", type=str, help="What the image should show")
    generate.add_argument(
        "--size",
        choices=[s.value for s in ImageSize],
        default=ImageSize.ONE_K.value,
        help="Resolution tier (default: 1K)",
    )
    generate.add_argument("--output", "-o", default="output/studio_image", help="Output file path")

    edit = subparsers.add_parser("edit", help="Edit an existing image")
    edit.add_argument("image", type=str, help="Path to the image to edit")
    edit.add_argument("instruction", type=str, help="How to change the image")
    edit.add_argument("--output", "-o", default="output/edited_image", help="Output file path")

    args = parser.parse_args()
    configure_logging(json_format=use_json_logs())

    try:
        result = asyncio.run(run(args))
    except GenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    path = write_image(result, args.output)
    print(f"Image saved to: {path}")


if __name__ == "__main__":
    main()
