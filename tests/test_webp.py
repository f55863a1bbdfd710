"""Tests for the WEBP re-encoding of raster images."""

import pytest
from PIL import Image

from svg2vd.exceptions import ImageConversionException
from svg2vd.webp import image_to_webp


@pytest.fixture
def png_path(tmp_path):
    path = tmp_path / "ImgBanner.png"
    Image.new("RGBA", (8, 4), (255, 0, 0, 128)).save(path)
    return path


class TestImageToWebp:
    def test_lossy(self, png_path, tmp_path):
        output = image_to_webp(png_path, quality=80)
        assert output == tmp_path / "img_banner.webp"
        with Image.open(output) as image:
            assert image.format == "WEBP"
            assert image.size == (8, 4)

    def test_lossless(self, png_path):
        output = image_to_webp(png_path, quality=100)
        with Image.open(output) as image:
            assert image.getpixel((0, 0)) == (255, 0, 0, 128)

    def test_palette_image(self, tmp_path):
        path = tmp_path / "palette.png"
        Image.new("P", (4, 4), 3).save(path)
        with Image.open(image_to_webp(path)) as image:
            assert image.format == "WEBP"

    def test_output_dir(self, png_path, tmp_path):
        output_dir = tmp_path / "drawable"
        output_dir.mkdir()
        assert image_to_webp(png_path, output_dir=output_dir) == output_dir / "img_banner.webp"

    def test_output_dir_is_created(self, png_path, tmp_path):
        output_dir = tmp_path / "res" / "drawable"
        assert image_to_webp(png_path, output_dir=output_dir) == output_dir / "img_banner.webp"

    def test_output_dir_is_a_file(self, png_path, tmp_path):
        output_dir = tmp_path / "drawable"
        output_dir.write_text("", encoding="utf-8")
        with pytest.raises(ImageConversionException, match="ImgBanner.png"):
            image_to_webp(png_path, output_dir=output_dir)

    def test_overwrite_is_logged(self, png_path, log_records):
        image_to_webp(png_path)
        image_to_webp(png_path)
        assert any(r["level"].name == "WARNING" and "overwriting" in r["message"] for r in log_records)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ImageConversionException, match="missing.png"):
            image_to_webp(tmp_path / "missing.png")

    def test_not_an_image(self, tmp_path):
        path = tmp_path / "broken.png"
        path.write_bytes(b"not a png")
        with pytest.raises(ImageConversionException, match="decode"):
            image_to_webp(path)

    @pytest.mark.parametrize("quality", [-1, 101])
    def test_invalid_quality(self, png_path, quality):
        with pytest.raises(ImageConversionException):
            image_to_webp(png_path, quality=quality)
