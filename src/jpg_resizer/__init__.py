"""jpg_resizer - Batch JPEG resizer with a lossless intermediate pipeline."""

from .common.constants import VERSION
from .common.errors import (
    ConversionError,
    DirectoryUnavailableError,
    InvalidDimensionError,
    ResizerError,
)
from .common.schema_job import ResizeJob, ResizeMode, ResizeParams, ResizeReport, RunStatus
from .pipeline import ResizePipeline, run_resize

__version__ = VERSION

__all__ = [
    "ConversionError",
    "DirectoryUnavailableError",
    "InvalidDimensionError",
    "ResizeJob",
    "ResizeMode",
    "ResizeParams",
    "ResizePipeline",
    "ResizeReport",
    "ResizerError",
    "RunStatus",
    "__version__",
    "run_resize",
]
