"""Error hierarchy for the resizer."""

from pathlib import Path
from typing import override


class ResizerError(Exception):
    """Base class for resizer errors."""


class InvalidDimensionError(ResizerError, ValueError):
    def __init__(self, value: object, minimum: int, maximum: int):
        self.value: object = value
        super().__init__(
            f"invalid dimension {value!r}: expected an integer between {minimum} and {maximum}"
        )


class DirectoryUnavailableError(ResizerError):
    def __init__(self, path: str | Path, reason: str | None = None):
        self.path: Path = Path(path)
        message = f"directory unavailable: {self.path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ConversionError(ResizerError):
    """
    Raised when one of the conversion stages fails for a file.

    Carries the source file name and failing stage along with the detail
    reported by the image library.
    """

    def __init__(self, file_name: str, stage: str, detail: str):
        self.file_name: str = file_name
        self.stage: str = stage
        self.detail: str = detail
        super().__init__(file_name, stage, detail)

    @override
    def __str__(self) -> str:
        return f"{self.stage} failed for {self.file_name}: {self.detail}"
