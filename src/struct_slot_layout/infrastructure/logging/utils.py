#!/usr/bin/env python3

"""Logging utility functions and decorators."""

import logging
from collections.abc import Callable
from functools import wraps
from time import perf_counter
from typing import Any, TypeVar, cast

# Type variable for generic function decoration
F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def log_timing(func: F) -> F:
    """
    Decorator to log how long a layout step takes.

    Rejected input (``ValueError``, which includes every layout error) is
    logged at debug level only; the caller decides how to report it, e.g. as
    a per-struct failure. Any other exception is logged as an error.

    Args:
        func: Function to decorate

    Returns:
        Wrapped function that logs timing
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger(func.__module__)
        step = func.__qualname__

        logger.debug(f"{step}: started")
        start_time = perf_counter()

        try:
            result = func(*args, **kwargs)
        except ValueError as e:
            elapsed_ms = (perf_counter() - start_time) * 1000
            logger.debug(f"{step}: rejected after {elapsed_ms:.1f}ms ({type(e).__name__}: {e})")
            raise
        except Exception as e:
            elapsed_ms = (perf_counter() - start_time) * 1000
            logger.error(f"{step}: failed after {elapsed_ms:.1f}ms: {e}")
            raise

        elapsed_ms = (perf_counter() - start_time) * 1000
        logger.debug(f"{step}: done in {elapsed_ms:.1f}ms")
        return result

    return cast("F", wrapper)
