"""
Centralized domain types for the Kids News Generator.

All dataclasses that are used across multiple modules are defined here
to make data flow explicit and avoid circular imports.
"""

import base64
import re
from dataclasses import dataclass
from enum import Enum
from io import BytesIO
from pathlib import Path
from typing import Iterator, Optional, Union


# =============================================================================
# Enums
# =============================================================================


class ImageSize(str, Enum):
    """Resolution tier for standalone image generation."""

    ONE_K = "1K"
    TWO_K = "2K"
    FOUR_K = "4K"


class ImageStatus(str, Enum):
    """Which branch produced a paragraph's image reference."""

    GENERATED = "generated"
    FAILED = "failed"  # Request raised, failure placeholder used
    MISSING = "missing"  # Request succeeded without an image part


# =============================================================================
# Image Types
# =============================================================================


_DATA_URI_RE = re.compile(r"^data:(?P<mime>[^;,]+);base64,(?P<data>.*)$", re.DOTALL)


@dataclass(frozen=True)
class InlineImage:
    """Raw image bytes plus their MIME type."""

    data: bytes
    mime_type: str

    def to_data_uri(self) -> str:
        """Encode as a data: URI suitable for an <img src>."""
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"

    @property
    def extension(self) -> str:
        """File suffix for this image type (".png", ".jpeg", ...)."""
        subtype = self.mime_type.split("/")[-1].lower()
        return ".jpg" if subtype == "jpeg" else f".{subtype}"

    @classmethod
    def from_data_uri(cls, uri: str) -> "InlineImage":
        """
        Parse a base64 data: URI.

        Raises:
            ValueError: If the URI is not a base64 data URI
        """
        match = _DATA_URI_RE.match(uri.strip())
        if not match:
            raise ValueError("Failed to extract base64 data or mime type from data URI.")
        return cls(data=base64.b64decode(match.group("data")), mime_type=match.group("mime"))

    @classmethod
    def from_bytes(cls, data: bytes) -> "InlineImage":
        """
        Wrap image bytes, detecting the MIME type with Pillow.

        Raises:
            ValueError: If the bytes are not a recognizable image
        """
        from PIL import Image, UnidentifiedImageError

        try:
            with Image.open(BytesIO(data)) as img:
                image_format = img.format
        except UnidentifiedImageError as e:
            raise ValueError("Unrecognized image data") from e

        mime_type = Image.MIME.get(image_format)
        if not mime_type:
            raise ValueError(f"Unsupported image format: {image_format}")
        return cls(data=data, mime_type=mime_type)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "InlineImage":
        """Load an image file from disk."""
        return cls.from_bytes(Path(path).read_bytes())


@dataclass(frozen=True)
class ImageResult:
    """A standalone image from the image studio."""

    url: str
    prompt: str
    size: Optional[ImageSize] = None


# =============================================================================
# Article Types
# =============================================================================


@dataclass(frozen=True)
class ParagraphDraft:
    """One paragraph of article text, before illustration."""

    paragraph: str


@dataclass(frozen=True)
class ArticleParagraph:
    """One paragraph of the finished article with its image reference."""

    text: str
    image_reference: str  # data: URI or placeholder URL
    image_status: ImageStatus = ImageStatus.GENERATED

    @property
    def is_placeholder(self) -> bool:
        return self.image_status != ImageStatus.GENERATED


@dataclass(frozen=True)
class ArticleResult:
    """Complete illustrated article, paragraphs in the order they were written."""

    topic: str
    paragraphs: tuple[ArticleParagraph, ...]

    def __len__(self) -> int:
        return len(self.paragraphs)

    def __iter__(self) -> Iterator[ArticleParagraph]:
        return iter(self.paragraphs)

    def __getitem__(self, index: int) -> ArticleParagraph:
        return self.paragraphs[index]

    @property
    def placeholder_count(self) -> int:
        """Number of paragraphs showing a placeholder instead of a real image."""
        return sum(1 for p in self.paragraphs if p.is_placeholder)

    def to_markdown(self, image_paths: Optional[list[str]] = None) -> str:
        """
        Format the article as markdown.

        Args:
            image_paths: Optional per-paragraph image paths to link instead of
                the raw image references (data URIs are unwieldy in files).
        """
        lines = [
            f"# Kids News: {self.topic}",
            "",
            "---",
            "",
        ]

        for i, paragraph in enumerate(self.paragraphs):
            image = image_paths[i] if image_paths else paragraph.image_reference
            lines.append(f"![Paragraph {i + 1}]({image})")
            lines.append("")
            lines.append(paragraph.text)
            lines.append("")

        lines.append("---")
        lines.append(f"Paragraphs: {len(self.paragraphs)}")
        lines.append(f"Placeholder images: {self.placeholder_count}")

        return "\n".join(lines)
