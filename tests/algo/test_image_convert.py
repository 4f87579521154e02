"""Tests for the Pillow reformat primitives."""

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

from jpg_resizer.algo.image_convert import reformat_and_strip, reformat_same_size


def test_reformat_same_size_jpg_to_png(synthetic_image: Path, tmp_path: Path):
    output_path = tmp_path / "a-samesize.png"

    result = reformat_same_size(input_path=synthetic_image, output_path=output_path)

    assert result == str(output_path)
    with Image.open(output_path) as img:
        assert img.format == "PNG"
        assert img.size == (800, 600)


def test_reformat_same_size_cmyk(tmp_path: Path):
    """CMYK JPEGs cannot be written as PNG directly."""
    source = tmp_path / "cmyk.jpg"
    Image.new("CMYK", (40, 30), color=(0, 100, 200, 0)).save(source, "JPEG")
    output_path = tmp_path / "cmyk.png"

    _ = reformat_same_size(input_path=source, output_path=output_path)

    with Image.open(output_path) as img:
        assert img.mode == "RGB"
        assert img.size == (40, 30)


def test_reformat_same_size_file_not_found(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        _ = reformat_same_size(
            input_path=tmp_path / "missing.jpg",
            output_path=tmp_path / "out.png",
        )


def test_reformat_same_size_corrupt(
    tmp_path: Path,
    corrupt_jpeg_factory: Callable[[Path], Path],
):
    source = corrupt_jpeg_factory(tmp_path / "bad.jpg")

    with pytest.raises(OSError):
        _ = reformat_same_size(input_path=source, output_path=tmp_path / "bad.png")


def test_reformat_output_directory_not_found(synthetic_image: Path, tmp_path: Path):
    output_path = tmp_path / "nonexistent" / "dir" / "output.png"

    with pytest.raises(FileNotFoundError, match="Output directory does not exist"):
        _ = reformat_same_size(input_path=synthetic_image, output_path=output_path)


def test_reformat_and_strip_png_to_jpg(tmp_path: Path):
    source = tmp_path / "in.png"
    Image.new("RGB", (64, 48), color=(10, 20, 30)).save(source, "PNG")
    output_path = tmp_path / "out.jpg"

    result = reformat_and_strip(input_path=source, output_path=output_path)

    assert result == str(output_path)
    with Image.open(output_path) as img:
        assert img.format == "JPEG"
        assert img.size == (64, 48)


def test_reformat_and_strip_rgba(tmp_path: Path):
    """Alpha channel is dropped for JPEG."""
    source = tmp_path / "rgba.png"
    Image.new("RGBA", (100, 100), color=(255, 0, 0, 128)).save(source, "PNG")
    output_path = tmp_path / "out.jpg"

    _ = reformat_and_strip(input_path=source, output_path=output_path)

    with Image.open(output_path) as img:
        assert img.mode == "RGB"


def test_reformat_and_strip_drops_metadata(tmp_path: Path):
    source = tmp_path / "with_meta.jpg"
    exif = Image.Exif()
    exif[0x010F] = "ACME Camera"  # Make
    icc = b"\x00" * 128
    Image.new("RGB", (32, 32), color=(1, 2, 3)).save(source, "JPEG", exif=exif, icc_profile=icc)

    with Image.open(source) as img:
        assert "exif" in img.info
        assert "icc_profile" in img.info

    output_path = tmp_path / "stripped.jpg"
    _ = reformat_and_strip(input_path=source, output_path=output_path)

    with Image.open(output_path) as img:
        assert "exif" not in img.info
        assert "icc_profile" not in img.info
        assert len(img.getexif()) == 0


def test_reformat_and_strip_quality(tmp_path: Path, jpeg_factory: Callable[..., Path]):
    source = jpeg_factory(tmp_path / "in.jpg")
    low = tmp_path / "low.jpg"
    high = tmp_path / "high.jpg"

    _ = reformat_and_strip(input_path=source, output_path=low, quality=20)
    _ = reformat_and_strip(input_path=source, output_path=high, quality=95)

    assert high.stat().st_size > low.stat().st_size
