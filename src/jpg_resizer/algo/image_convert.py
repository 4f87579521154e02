"""Pure image format conversion logic (single file)."""

from pathlib import Path

from PIL import Image

# Modes the PNG encoder accepts as-is
_PNG_MODES = ("1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA")


def reformat_same_size(
    *,
    input_path: str | Path,
    output_path: str | Path,
) -> str:
    """
    Re-encode an image as PNG at unchanged dimensions.

    Args:
        input_path: Path to the source image
        output_path: Path of the PNG to write

    Returns:
        Output file path as string

    Raises:
        FileNotFoundError: If the input file or output directory does not exist
        OSError: If Pillow fails to read/write the image
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    _require_parent(output_path)

    with Image.open(input_path) as img:
        img.load()
        converted = img if img.mode in _PNG_MODES else img.convert("RGB")
        converted.save(output_path, format="PNG")

    return str(output_path)


def reformat_and_strip(
    *,
    input_path: str | Path,
    output_path: str | Path,
    quality: int | None = None,
) -> str:
    """
    Re-encode an image as JPEG without carrying over any metadata.

    EXIF, ICC profiles and other ancillary chunks of the source are dropped.

    Args:
        input_path: Path to the source image
        output_path: Path of the JPEG to write
        quality: Optional JPEG quality, Pillow's default when None

    Returns:
        Output file path as string

    Raises:
        FileNotFoundError: If the input file or output directory does not exist
        OSError: If Pillow fails to read/write the image
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    _require_parent(output_path)

    with Image.open(input_path) as img:
        img.load()
        # JPEG has no alpha channel
        stripped = img.convert("RGB") if img.mode != "RGB" else img.copy()
        stripped.info = {}

        save_kwargs: dict[str, object] = {}
        if quality is not None:
            save_kwargs["quality"] = quality

        stripped.save(output_path, format="JPEG", **save_kwargs)

    return str(output_path)


def _require_parent(output_path: Path) -> None:
    if not output_path.parent.exists():
        raise FileNotFoundError(f"Output directory does not exist: {output_path.parent}")
