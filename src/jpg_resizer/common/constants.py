"""Fixed names, extensions and limits shared by the whole pipeline."""

from typing import Final

VERSION: Final[str] = "0.1.0"

DEFAULT_INPUT_DIR: Final[str] = "."
DEFAULT_OUTPUT_DIR: Final[str] = "."

ORIGINAL_FILE_EXTENSION: Final[str] = ".jpg"
TEMP_FILE_EXTENSION: Final[str] = ".png"

TEMP_FIRST_FILE_SUFFIX: Final[str] = "-samesize"
TEMP_SECOND_FILE_SUFFIX: Final[str] = "-newsize"
CONVERTED_FILE_SUFFIX: Final[str] = "-converted"

MIN_DIMENSION: Final[int] = 1
MAX_DIMENSION: Final[int] = 10000
