"""Pydantic models describing a resize run."""

from enum import StrEnum
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import MAX_DIMENSION, MIN_DIMENSION
from .naming import stage1_name


class ResizeMode(StrEnum):
    BOX = "box"
    WIDTH = "width"
    HEIGHT = "height"

    @classmethod
    def from_dimensions(cls, width: int | None, height: int | None) -> "ResizeMode | None":
        if width is not None and height is not None:
            return ResizeMode.BOX
        elif height is not None:
            return ResizeMode.HEIGHT
        elif width is not None:
            return ResizeMode.WIDTH
        else:
            return None


class RunStatus(StrEnum):
    NO_DIMENSIONS = "no_dimensions"
    NO_INPUT_FILES = "no_input_files"
    COMPLETED = "completed"


class ResizeParams(BaseModel):
    """Validated configuration of one run.

    Attributes:
        input_dir: Absolute path to the directory scanned for source files
        output_dir: Absolute path receiving converted files and the temp dir
        width: Target width in pixels (None = not requested)
        height: Target height in pixels (None = not requested)
    """

    input_dir: Path = Field(description="absolute input directory")
    output_dir: Path = Field(description="absolute output directory")
    width: int | None = Field(None, ge=MIN_DIMENSION, le=MAX_DIMENSION)
    height: int | None = Field(None, ge=MIN_DIMENSION, le=MAX_DIMENSION)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @field_validator("input_dir", "output_dir")
    @classmethod
    def validate_absolute(cls, v: Path) -> Path:
        if not v.is_absolute():
            raise ValueError(f"directory must be absolute: {v}")
        return v

    @property
    def resize_mode(self) -> ResizeMode | None:
        return ResizeMode.from_dimensions(self.width, self.height)


class ResizeJob(BaseModel):
    """A run with its work list fixed."""

    params: ResizeParams
    source_files: tuple[str, ...] = Field(min_length=1)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @field_validator("source_files")
    @classmethod
    def validate_source_names(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        for name in v:
            # raises ValueError for names the naming policy cannot handle
            _ = stage1_name(name)
        return v

    @property
    def mode(self) -> ResizeMode:
        mode = self.params.resize_mode
        if mode is None:
            raise ValueError("a resize job needs a width, a height or both")
        return mode


class ResizeReport(BaseModel):
    """Outcome of a run that did not fail."""

    status: RunStatus
    input_dir: Path
    output_dir: Path
    converted_files: list[str] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.converted_files)
