"""
Conversion stages.

Each stage wraps one image-library primitive, reads one file and writes
another, and resolves to the name of the file it produced.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import override

from loguru import logger
from PIL import Image

from .algo.image_convert import reformat_and_strip, reformat_same_size
from .algo.image_resize import resize
from .common.errors import ConversionError
from .common.naming import output_name, stage1_name, stage2_name
from .common.schema_job import ResizeMode
from .utils.profiling import timed


class ConversionStage(ABC):
    """
    Template-method base for a single conversion step.

    - run() performs the library call and returns the produced file name
    - execute() maps library failures to ConversionError
    """

    @property
    @abstractmethod
    def stage_name(self) -> str: ...

    @abstractmethod
    async def run(self, file_name: str) -> str: ...

    async def execute(self, file_name: str, original_name: str) -> str:
        logger.debug(f"{self.stage_name}: {file_name}")
        try:
            return await self.run(file_name)
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            raise ConversionError(original_name, self.stage_name, str(exc)) from exc


class SameSizeReformatStage(ConversionStage):
    """Original JPEG in the input dir -> lossless copy in the temp dir."""

    def __init__(self, input_dir: Path, temp_dir: Path):
        self.input_dir: Path = input_dir
        self.temp_dir: Path = temp_dir

    @property
    @override
    def stage_name(self) -> str:
        return "reformat_same_size"

    @timed
    @override
    async def run(self, file_name: str) -> str:
        produced = stage1_name(file_name)
        _ = reformat_same_size(
            input_path=self.input_dir / file_name,
            output_path=self.temp_dir / produced,
        )
        return produced


class ResizeStage(ConversionStage):
    """Lossless copy -> resized lossless copy, both in the temp dir."""

    def __init__(
        self,
        temp_dir: Path,
        mode: ResizeMode,
        width: int | None = None,
        height: int | None = None,
    ):
        self.temp_dir: Path = temp_dir
        self.mode: ResizeMode = mode
        self.width: int | None = width
        self.height: int | None = height

    @property
    @override
    def stage_name(self) -> str:
        return f"resize_{self.mode}"

    @timed
    @override
    async def run(self, file_name: str) -> str:
        produced = stage2_name(file_name)
        _ = resize(
            input_path=self.temp_dir / file_name,
            output_path=self.temp_dir / produced,
            mode=self.mode,
            width=self.width,
            height=self.height,
        )
        return produced


class StripReformatStage(ConversionStage):
    """Resized lossless copy -> metadata-free JPEG in the output dir."""

    def __init__(self, temp_dir: Path, output_dir: Path):
        self.temp_dir: Path = temp_dir
        self.output_dir: Path = output_dir

    @property
    @override
    def stage_name(self) -> str:
        return "reformat_and_strip"

    @timed
    @override
    async def run(self, file_name: str) -> str:
        produced = output_name(file_name)
        _ = reformat_and_strip(
            input_path=self.temp_dir / file_name,
            output_path=self.output_dir / produced,
        )
        return produced
