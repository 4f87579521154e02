"""
Naming policy for temporary and converted files.

Every artifact name is derived from the original file name by suffix
substitution. Path joining is left to the caller.
"""

from .constants import (
    CONVERTED_FILE_SUFFIX,
    ORIGINAL_FILE_EXTENSION,
    TEMP_FILE_EXTENSION,
    TEMP_FIRST_FILE_SUFFIX,
    TEMP_SECOND_FILE_SUFFIX,
)


def _replace_suffix(name: str, old: str, new: str) -> str:
    if not name.endswith(old):
        raise ValueError(f"{name!r} does not end with {old!r}")
    return name[: -len(old)] + new


def stage1_name(original: str) -> str:
    """photo.jpg -> photo-samesize.png"""
    return _replace_suffix(
        original,
        ORIGINAL_FILE_EXTENSION,
        TEMP_FIRST_FILE_SUFFIX + TEMP_FILE_EXTENSION,
    )


def stage2_name(stage1: str) -> str:
    """photo-samesize.png -> photo-newsize.png"""
    return _replace_suffix(
        stage1,
        TEMP_FIRST_FILE_SUFFIX + TEMP_FILE_EXTENSION,
        TEMP_SECOND_FILE_SUFFIX + TEMP_FILE_EXTENSION,
    )


def output_name(stage2: str) -> str:
    """photo-newsize.png -> photo-converted.jpg"""
    return _replace_suffix(
        stage2,
        TEMP_SECOND_FILE_SUFFIX + TEMP_FILE_EXTENSION,
        CONVERTED_FILE_SUFFIX + ORIGINAL_FILE_EXTENSION,
    )
