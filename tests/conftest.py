"""Test configuration and fixtures for jpg_resizer.

This module provides:
- Pytest configuration (markers)
- Function-scoped fixtures (input/output dirs, generated JPEGs, progress recorder)
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image, ImageDraw

from jpg_resizer.common.schema_job import ResizeParams

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: runs the full pipeline against generated images",
    )


# ============================================================================
# Helpers
# ============================================================================


def write_jpeg(path: Path, size: tuple[int, int] = (800, 600), **save_kwargs: object) -> Path:
    """Write a synthetic JPEG with a grid and a circle so it is not flat."""
    width, height = size
    img = Image.new("RGB", size, color=(73, 109, 137))
    draw = ImageDraw.Draw(img)

    for i in range(0, width, 50):
        draw.line([(i, 0), (i, height)], fill=(255, 255, 255), width=2)
    for i in range(0, height, 50):
        draw.line([(0, i), (width, i)], fill=(255, 255, 255), width=2)

    draw.ellipse(
        [width * 3 // 8, height // 3, width * 5 // 8, height * 2 // 3],
        fill=(200, 100, 100),
    )

    img.save(path, "JPEG", quality=85, **save_kwargs)
    return path


def write_corrupt_jpeg(path: Path) -> Path:
    """Write a file with a .jpg name that no decoder accepts."""
    _ = path.write_bytes(b"\xff\xd8\xff\xe0 this is not really a jpeg")
    return path


class ProgressRecorder:
    """Records progress callback invocations."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, int, str, str]] = []

    def __call__(self, index: int, total: int, original: str, converted: str) -> None:
        self.calls.append((index, total, original, converted))


# ============================================================================
# Function-Scoped Fixtures (Run Per Test)
# ============================================================================


@pytest.fixture
def input_dir(tmp_path: Path) -> Path:
    """Provide an empty input directory."""
    path = tmp_path / "input"
    path.mkdir()
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Provide an empty output directory."""
    path = tmp_path / "output"
    path.mkdir()
    return path


@pytest.fixture
def synthetic_image(input_dir: Path) -> Path:
    """Generate an 800x600 JPEG named a.jpg in the input directory."""
    return write_jpeg(input_dir / "a.jpg")


@pytest.fixture
def make_params(input_dir: Path, output_dir: Path) -> Callable[..., ResizeParams]:
    """Build ResizeParams for the fixture directories."""

    def _make(width: int | None = None, height: int | None = None) -> ResizeParams:
        return ResizeParams(
            input_dir=input_dir,
            output_dir=output_dir,
            width=width,
            height=height,
        )

    return _make


@pytest.fixture
def progress_recorder() -> ProgressRecorder:
    """Create a progress recorder."""
    return ProgressRecorder()


def entries(path: Path) -> set[str]:
    return {child.name for child in path.iterdir()}


@pytest.fixture
def jpeg_factory() -> Callable[..., Path]:
    """Provide write_jpeg to tests."""
    return write_jpeg


@pytest.fixture
def corrupt_jpeg_factory() -> Callable[[Path], Path]:
    """Provide write_corrupt_jpeg to tests."""
    return write_corrupt_jpeg


@pytest.fixture
def list_entries() -> Callable[[Path], set[str]]:
    """Provide a directory listing helper returning entry names."""
    return entries
