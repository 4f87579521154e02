"""Timing helpers for the conversion stages."""

import inspect
import time
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec, TypeVar, cast

from loguru import logger

P = ParamSpec("P")
R = TypeVar("R")


def timed(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator logging the execution time of sync and async callables.

    Logs the qualified name and elapsed time at DEBUG level, whether the call
    returns or raises.

    Usage:
        @timed
        async def run(self, file_name):
            ...
    """

    if inspect.iscoroutinefunction(func):

        @wraps(func)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            start_time = time.perf_counter()
            try:
                return await cast(Callable[P, Awaitable[R]], func)(*args, **kwargs)
            finally:
                _log_elapsed(func, start_time)

        return cast(Callable[P, R], async_wrapper)

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            _log_elapsed(func, start_time)

    return wrapper


def _log_elapsed(func: Callable[..., object], start_time: float) -> None:
    elapsed_time = time.perf_counter() - start_time
    logger.debug(f"[PROFILE] {func.__qualname__} took {elapsed_time:.3f}s")
