"""Common module - constants, errors, schemas, naming and filesystem helpers."""

from .errors import ConversionError, DirectoryUnavailableError, InvalidDimensionError, ResizerError
from .naming import output_name, stage1_name, stage2_name
from .paths import list_source_files, parse_dimension, resolve_directory
from .schema_job import ResizeJob, ResizeMode, ResizeParams, ResizeReport, RunStatus
from .work_dir import temporary_work_dir

__all__ = [
    "ConversionError",
    "DirectoryUnavailableError",
    "InvalidDimensionError",
    "ResizerError",
    "ResizeJob",
    "ResizeMode",
    "ResizeParams",
    "ResizeReport",
    "RunStatus",
    "list_source_files",
    "output_name",
    "parse_dimension",
    "resolve_directory",
    "stage1_name",
    "stage2_name",
    "temporary_work_dir",
]
