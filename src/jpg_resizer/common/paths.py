"""Argument-level validation: directories, dimensions and source files."""

import os
from pathlib import Path

from loguru import logger

from .constants import MAX_DIMENSION, MIN_DIMENSION, ORIGINAL_FILE_EXTENSION
from .errors import DirectoryUnavailableError, InvalidDimensionError


def resolve_directory(value: str | os.PathLike[str]) -> Path:
    """
    Resolve a directory argument to an absolute path, creating it if absent.

    Relative paths are joined to the current working directory. Missing
    ancestors are created as well.

    Raises:
        DirectoryUnavailableError: If the directory cannot be created or the
            path exists but is not a directory
    """
    path = Path(value)
    if not path.is_absolute():
        path = Path.cwd() / path

    if not path.exists():
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryUnavailableError(path, exc.strerror) from exc
        logger.debug(f"Created directory {path}")

    if not path.is_dir():
        raise DirectoryUnavailableError(path, "not a directory")

    return path


def parse_dimension(value: str) -> int:
    """
    Validate a width/height argument.

    Raises:
        InvalidDimensionError: If the value is not an integer or lies outside
            [MIN_DIMENSION, MAX_DIMENSION]
    """
    digits = value.strip()
    # plain ASCII decimal only: no sign, underscores or non-ASCII digits
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidDimensionError(value, MIN_DIMENSION, MAX_DIMENSION)

    dimension = int(digits)

    if dimension < MIN_DIMENSION or dimension > MAX_DIMENSION:
        raise InvalidDimensionError(value, MIN_DIMENSION, MAX_DIMENSION)

    return dimension


def list_source_files(input_dir: str | os.PathLike[str]) -> list[str]:
    """
    List the names of files in ``input_dir`` with the original extension.

    Order is the directory listing order. The extension match is exact and
    case-sensitive, so ``photo.JPG`` and ``photo.jpeg`` are skipped.

    Raises:
        DirectoryUnavailableError: If the directory cannot be listed
    """
    names: list[str] = []
    try:
        with os.scandir(input_dir) as entries:
            for entry in entries:
                if not entry.is_file():
                    continue
                if os.path.splitext(entry.name)[1] == ORIGINAL_FILE_EXTENSION:
                    names.append(entry.name)
    except OSError as exc:
        raise DirectoryUnavailableError(input_dir, exc.strerror) from exc
    return names
