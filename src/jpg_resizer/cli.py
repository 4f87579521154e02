"""Command-line entry point: ``jpg-resizer``."""

import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from .common.constants import (
    DEFAULT_INPUT_DIR,
    DEFAULT_OUTPUT_DIR,
    MAX_DIMENSION,
    MIN_DIMENSION,
    VERSION,
)
from .common.errors import DirectoryUnavailableError, InvalidDimensionError, ResizerError
from .common.paths import parse_dimension, resolve_directory
from .common.schema_job import ResizeParams, RunStatus
from .pipeline import run_resize
from .utils.log_config import configure_logging

ERROR_BANNER = "!!! ERROR !!!"


def _directory_arg(value: str) -> Path:
    try:
        return resolve_directory(value)
    except DirectoryUnavailableError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _dimension_arg(value: str) -> int:
    try:
        return parse_dimension(value)
    except InvalidDimensionError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    # -h is the height flag, so help is only reachable as --help
    parser = argparse.ArgumentParser(
        prog="jpg-resizer",
        usage="%(prog)s <options>",
        description="Resize every .jpg file of a directory through a lossless intermediate.",
        add_help=False,
    )
    _ = parser.add_argument(
        "--help",
        action="help",
        help="show this help message and exit",
    )
    _ = parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}",
    )
    _ = parser.add_argument(
        "-i",
        "--input_dir",
        type=_directory_arg,
        default=DEFAULT_INPUT_DIR,
        help="input directory (default: current directory)",
    )
    _ = parser.add_argument(
        "-o",
        "--output_dir",
        type=_directory_arg,
        default=DEFAULT_OUTPUT_DIR,
        help="output directory (default: current directory)",
    )
    _ = parser.add_argument(
        "-w",
        "--resize_width",
        type=_dimension_arg,
        help=f"resize width (min: {MIN_DIMENSION}, max: {MAX_DIMENSION})",
    )
    _ = parser.add_argument(
        "-h",
        "--resize_height",
        type=_dimension_arg,
        help=f"resize height (min: {MIN_DIMENSION}, max: {MAX_DIMENSION})",
    )
    _ = parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log pipeline diagnostics to stderr",
    )
    return parser


def _print_progress(index: int, total: int, original: str, converted: str) -> None:
    print(f"({index}/{total}) resized {original} to {converted}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    params = ResizeParams(
        input_dir=args.input_dir,
        output_dir=args.output_dir,
        width=args.resize_width,
        height=args.resize_height,
    )

    if params.resize_mode is None:
        parser.print_help()
        return 0

    try:
        report = asyncio.run(run_resize(params, _print_progress))
    except ResizerError as exc:
        print(ERROR_BANNER, file=sys.stderr)
        print(exc, file=sys.stderr)
        return 1

    if report.status == RunStatus.NO_INPUT_FILES:
        print(f"no jpg files found in {report.input_dir}")
    elif report.status == RunStatus.COMPLETED:
        print(
            f"Done, resized {report.count} jpg files "
            f"(input dir: {report.input_dir}, output dir: {report.output_dir})"
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
