#!/usr/bin/env python3

"""Logging utility functions and decorators."""

import logging
from collections.abc import Callable
from functools import wraps
from time import perf_counter
from typing import Any, TypeVar, cast, overload

# Type variable for generic function decoration
F = TypeVar("F", bound=Callable[..., Any])

PACKAGE_LOGGER_NAME = "typed_reflection"

# Library modules never install handlers; applications call LoggerSetup.initialize
logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance (handlers are configured by LoggerSetup)
    """
    return logging.getLogger(name)


@overload
def log_timing(func: F) -> F: ...


@overload
def log_timing(*, level: int = logging.DEBUG) -> Callable[[F], F]: ...


def log_timing(func: F | None = None, *, level: int = logging.DEBUG) -> Any:
    """
    Decorator to log how long a call takes.

    Usable bare (``@log_timing``) or with a level (``@log_timing(level=logging.INFO)``).
    Failures are always logged at ERROR with the exception type, then re-raised.

    Args:
        func: Function to decorate
        level: Level used for the start/completion messages

    Returns:
        Wrapped function that logs timing
    """

    def decorate(target: F) -> F:
        @wraps(target)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            logger = get_logger(target.__module__)
            name = target.__qualname__

            logger.log(level, f"Starting {name}")
            start = perf_counter()
            try:
                result = target(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Failed {name} after {perf_counter() - start:.3f}s: {type(e).__name__}: {e}"
                )
                raise
            logger.log(level, f"Completed {name} in {perf_counter() - start:.3f}s")
            return result

        return cast("F", wrapper)

    if func is not None:
        return decorate(func)
    return decorate
