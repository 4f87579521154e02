"""loguru sink setup for the command-line entry point."""

import sys

from loguru import logger

_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}"


def configure_logging(verbose: bool = False) -> None:
    """Replace loguru's default sink with a single stderr sink."""
    logger.remove()
    _ = logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format=_FORMAT,
    )
