#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2godoc/logging_utils.py
"""Centralized logging setup for the md2godoc command line entry point."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from md2godoc.constants import DEFAULT_LOG_LEVEL


def resolve_log_level(log_level: str | None = None, verbose: bool = False, trace: bool = False) -> int:
    """Turn CLI logging flags into a numeric level.

    ``--trace`` wins over ``--verbose``, which only raises the level to DEBUG
    when ``--log-level`` was left at its default.

    Parameters
    ----------
    log_level : str or None
        Level name such as "INFO"; unknown names fall back to WARNING
    verbose : bool, default False
        Verbose flag
    trace : bool, default False
        Trace flag

    Returns
    -------
    int
        Logging level

    """
    level_name = (log_level or DEFAULT_LOG_LEVEL).upper()
    if trace:
        return logging.DEBUG
    if verbose and level_name == DEFAULT_LOG_LEVEL:
        return logging.DEBUG
    level = getattr(logging, level_name, None)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure root logging handlers.

    Log records always go to stderr so that ``--stdout`` output stays a clean
    Go source file.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    resolved_level = log_level if isinstance(log_level, int) else resolve_log_level(str(log_level))

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "%(levelname)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:  # pragma: no cover - handled at runtime
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)

    return root_logger
