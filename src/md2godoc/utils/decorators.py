#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2godoc/utils/decorators.py
"""Decorators and context managers shared by the parser and the API layer."""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from md2godoc.exceptions import DependencyError


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check that required packages import before running the decorated method.

    Parameters
    ----------
    converter_name : str
        Name of the component (e.g. "markdown"), used in error messages
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples.
        The version spec is only reported, not checked.

    Returns
    -------
    Callable
        Decorated method that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package cannot be imported

    Examples
    --------
        >>> @requires_dependencies("markdown", [("mistune", "mistune", ">=3.0.0")])
        ... def parse(self, input_data):
        ...     import mistune

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing = []
            original_error = None

            for install_name, import_name, version_spec in packages:
                try:
                    importlib.import_module(import_name)
                except ImportError as e:
                    missing.append((install_name, version_spec))
                    if original_error is None:
                        original_error = e

            if missing:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    original_error=original_error,
                ) from original_error

            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log the duration of the wrapped block at DEBUG level.

    Nothing is measured when the logger is not enabled for DEBUG.

    Parameters
    ----------
    logger : logging.Logger
        Logger to write the timing message to
    operation : str
        Description of the timed operation (e.g. "Rendering (godoc)")

    Examples
    --------
        >>> with debug_timer(logger, "Parsing (markdown)"):
        ...     doc = parser.parse(text)

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield


__all__ = ["debug_timer", "requires_dependencies"]
