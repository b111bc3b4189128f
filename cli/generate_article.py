#!/usr/bin/env python3
"""
CLI for generating illustrated kids' news articles.

Usage:
    python cli/generate_article.py "a giant cookie was baked"
    python cli/generate_article.py "penguins learned to surf" --output penguins
    python cli/generate_article.py "the moon got a haircut" --stdout
"""

import argparse
import asyncio
import logging
import re
import sys
from datetime import datetime
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from kids_news.config import get_api_key
from kids_news.core.errors import GenerationError
from kids_news.core.programs.article_generator import ArticleGenerator
from kids_news.core.types import ArticleResult, InlineImage
from kids_news.logging import configure_logging, use_json_logs


def save_article(result: ArticleResult, output_dir: Path) -> Path:
    """Write the article markdown plus one image file per generated illustration."""
    images_dir = output_dir / "images"
    images_dir.mkdir(parents=True, exist_ok=True)

    image_paths = []
    for i, paragraph in enumerate(result.paragraphs, start=1):
        if paragraph.is_placeholder:
            image_paths.append(paragraph.image_reference)
            continue
        image = InlineImage.from_data_uri(paragraph.image_reference)
        filename = f"paragraph_{i:02d}{image.extension}"
        (images_dir / filename).write_bytes(image.data)
        image_paths.append(f"images/{filename}")

    article_path = output_dir / "article.md"
    article_path.write_text(result.to_markdown(image_paths=image_paths))
    return article_path


def main():
    parser = argparse.ArgumentParser(
        description="Generate a funny, illustrated news article for kids",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python cli/generate_article.py "a giant cookie was baked"
    python cli/generate_article.py "a cat became mayor" --output cat_mayor
    python cli/generate_article.py "dinosaurs at the zoo" --stdout
        """,
    )

    parser.add_argument(
        "topic",
        type=str,
        help="The news topic for the article",
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output directory name (under output/). Auto-generated if not specified.",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the article text to the terminal instead of saving files",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress information",
    )

    args = parser.parse_args()

    configure_logging(
        json_format=use_json_logs(),
        level=logging.INFO if args.verbose else logging.WARNING,
    )

    try:
        generator = ArticleGenerator(api_key=get_api_key())
        result = asyncio.run(generator.generate(args.topic))
    except GenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.stdout:
        for paragraph in result.paragraphs:
            print(paragraph.text)
            print()
    else:
        output_root = Path(__file__).parent.parent / "output"
        if args.output:
            dirname = args.output
        else:
            # Auto-generate directory name from topic and timestamp
            slug = re.sub(r"[^a-z0-9]+", "_", args.topic.lower())[:30].strip("_")
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            dirname = f"{slug}_{timestamp}"

        article_path = save_article(result, output_root / dirname)
        print(f"Article saved to: {article_path}")

    if args.verbose:
        print("\n--- Generation Summary ---")
        print(f"Topic: {result.topic}")
        print(f"Paragraphs: {len(result)}")
        print(f"Placeholder images: {result.placeholder_count}")


if __name__ == "__main__":
    main()
