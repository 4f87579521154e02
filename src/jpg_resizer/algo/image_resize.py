"""Pure image resize computation logic (single file)."""

from pathlib import Path

from PIL import Image

from ..common.schema_job import ResizeMode


def target_size(
    original: tuple[int, int],
    mode: ResizeMode,
    width: int | None = None,
    height: int | None = None,
) -> tuple[int, int]:
    """
    Compute the output size for a resize request.

    - BOX: fit within width x height, aspect ratio kept, upscaling allowed
    - WIDTH: width as requested, height follows the aspect ratio
    - HEIGHT: height as requested, width follows the aspect ratio

    Each side is at least one pixel.
    """
    orig_w, orig_h = original

    if mode == ResizeMode.BOX:
        if width is None or height is None:
            raise ValueError("box resize needs both width and height")
        scale = min(width / orig_w, height / orig_h)
        new_w, new_h = orig_w * scale, orig_h * scale
    elif mode == ResizeMode.WIDTH:
        if width is None:
            raise ValueError("width resize needs a width")
        new_w, new_h = width, orig_h * width / orig_w
    elif mode == ResizeMode.HEIGHT:
        if height is None:
            raise ValueError("height resize needs a height")
        new_w, new_h = orig_w * height / orig_h, height
    else:
        raise ValueError(f"Unsupported resize mode: {mode}")

    return max(1, round(new_w)), max(1, round(new_h))


def resize(
    *,
    input_path: str | Path,
    output_path: str | Path,
    mode: ResizeMode,
    width: int | None = None,
    height: int | None = None,
) -> str:
    """
    Resize a single image and write output in the input's format.

    Args:
        input_path: Path to input image
        output_path: Path to output image
        mode: Which of width/height drive the geometry
        width: Target width
        height: Target height

    Returns:
        Output file path as string

    Raises:
        FileNotFoundError: If input image does not exist
        OSError: If Pillow fails to read/write the image
    """
    input_path = Path(input_path)
    output_path = Path(output_path)

    with Image.open(input_path) as img:
        size = target_size(img.size, mode, width, height)
        resized = img.resize(size, Image.Resampling.LANCZOS)
        resized.save(output_path, format=img.format)

    return str(output_path)
