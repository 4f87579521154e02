"""Scoped temporary working directory for intermediate artifacts."""

import shutil
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from uuid import uuid4

from loguru import logger

from .errors import DirectoryUnavailableError


def new_work_dir_name() -> str:
    return uuid4().hex


@contextmanager
def temporary_work_dir(parent: Path) -> Iterator[Path]:
    """
    Create a uniquely named directory under ``parent`` and remove it on exit.

    Removal happens exactly once on every exit path, including exceptions
    raised by the body.

    A failed removal is logged. It is raised as DirectoryUnavailableError only
    when the body completed; an exception from the body takes precedence.

    Raises:
        DirectoryUnavailableError: If the directory cannot be created, or
            cannot be removed after a successful body
    """
    path = parent / new_work_dir_name()
    try:
        path.mkdir(parents=True, exist_ok=False)
    except OSError as exc:
        raise DirectoryUnavailableError(path, exc.strerror) from exc
    logger.debug(f"Created temp directory {path}")

    try:
        yield path
    except BaseException:
        _remove_work_dir(path, reraise=False)
        raise
    else:
        _remove_work_dir(path, reraise=True)


def _remove_work_dir(path: Path, *, reraise: bool) -> None:
    try:
        shutil.rmtree(path, ignore_errors=False)
    except OSError as exc:
        logger.exception(f"Failed to remove temp directory {path}")
        if reraise:
            raise DirectoryUnavailableError(path, f"cleanup failed: {exc.strerror}") from exc
        return
    logger.debug(f"Removed temp directory {path}")
