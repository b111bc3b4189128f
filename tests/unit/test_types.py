"""Unit tests for kids_news/core/types.py."""

import base64

import pytest

from kids_news.core.types import (
    ArticleParagraph,
    ArticleResult,
    ImageSize,
    ImageStatus,
    InlineImage,
)


class TestInlineImage:

    def test_to_data_uri(self):
        image = InlineImage(data=b"abc", mime_type="image/png")
        assert image.to_data_uri() == "data:image/png;base64," + base64.b64encode(b"abc").decode()

    def test_from_data_uri(self):
        uri = "data:image/jpeg;base64," + base64.b64encode(b"jpeg-bytes").decode()
        image = InlineImage.from_data_uri(uri)

        assert image.data == b"jpeg-bytes"
        assert image.mime_type == "image/jpeg"

    @pytest.mark.parametrize("uri", ["https://picsum.photos/400/400", "data:image/png,notbase64", ""])
    def test_from_data_uri_rejects_other_strings(self, uri):
        with pytest.raises(ValueError):
            InlineImage.from_data_uri(uri)

    @pytest.mark.parametrize(
        "mime_type,extension",
        [("image/png", ".png"), ("image/jpeg", ".jpg"), ("image/webp", ".webp")],
    )
    def test_extension(self, mime_type, extension):
        assert InlineImage(data=b"", mime_type=mime_type).extension == extension

    def test_from_bytes_detects_png(self, png_bytes):
        image = InlineImage.from_bytes(png_bytes)
        assert image.mime_type == "image/png"
        assert image.data == png_bytes

    def test_from_bytes_rejects_non_images(self):
        with pytest.raises(ValueError):
            InlineImage.from_bytes(b"definitely not an image")

    def test_from_file(self, tmp_path, png_bytes):
        path = tmp_path / "picture.png"
        path.write_bytes(png_bytes)

        image = InlineImage.from_file(path)

        assert image.mime_type == "image/png"


class TestArticleResult:

    @pytest.fixture
    def result(self):
        return ArticleResult(
            topic="a giant cookie was baked",
            paragraphs=(
                ArticleParagraph(text="One", image_reference="data:image/png;base64,AAAA"),
                ArticleParagraph(
                    text="Two",
                    image_reference="https://picsum.photos/400/400?grayscale",
                    image_status=ImageStatus.FAILED,
                ),
                ArticleParagraph(
                    text="Three",
                    image_reference="https://picsum.photos/400/400?blur=2",
                    image_status=ImageStatus.MISSING,
                ),
            ),
        )

    def test_sequence_behavior(self, result):
        assert len(result) == 3
        assert [p.text for p in result] == ["One", "Two", "Three"]
        assert result[1].text == "Two"

    def test_placeholder_count(self, result):
        assert result.placeholder_count == 2
        assert not result[0].is_placeholder

    def test_paragraphs_are_immutable(self, result):
        with pytest.raises(AttributeError):
            result[0].text = "changed"

    def test_to_markdown(self, result):
        markdown = result.to_markdown(image_paths=["images/p1.png", "a.png", "b.png"])

        assert markdown.startswith("# Kids News: a giant cookie was baked")
        assert "![Paragraph 1](images/p1.png)" in markdown
        assert "Paragraphs: 3" in markdown
        assert "Placeholder images: 2" in markdown

    def test_to_markdown_uses_references_by_default(self, result):
        assert "(https://picsum.photos/400/400?grayscale)" in result.to_markdown()


class TestImageSize:

    def test_values(self):
        assert [s.value for s in ImageSize] == ["1K", "2K", "4K"]
        assert ImageSize("2K") is ImageSize.TWO_K
