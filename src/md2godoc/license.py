#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2godoc/license.py
"""License header support.

A license file is copied line by line into a ``//`` comment block that sits
above the package documentation, separated from it by a blank line so that
Go does not treat it as part of the doc comment.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Union

from md2godoc.constants import COMMENT_PREFIX
from md2godoc.exceptions import FileError, FileNotFoundError
from md2godoc.utils.io_utils import decode_text

logger = logging.getLogger(__name__)


def read_license_lines(path: Union[str, Path]) -> list[str]:
    """Read a license file as a list of lines without line terminators.

    Parameters
    ----------
    path : str or Path
        License file to read

    Returns
    -------
    list of str
        Lines of the file

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    FileError
        If the file cannot be read

    """
    license_path = Path(path)
    try:
        data = license_path.read_bytes()
    except OSError as e:
        if not license_path.exists():
            raise FileNotFoundError(str(license_path), original_error=e) from e
        raise FileError(f"Cannot read license file {license_path}: {e}", file_path=str(license_path), original_error=e) from e

    lines = decode_text(data).splitlines()
    logger.debug("Read %d license lines from %s", len(lines), license_path)
    return lines


def format_license_header(lines: Iterable[str]) -> str:
    """Format license lines as a Go comment block.

    Blank lines become a bare ``//``; every other line is written as
    ``// <line>``. The block ends with an empty line.

    Parameters
    ----------
    lines : iterable of str
        License text, one entry per line

    Returns
    -------
    str
        Comment block ready to prepend to the rendered documentation

    Examples
    --------
        >>> format_license_header(["Copyright 2016", "", "MIT"])
        '// Copyright 2016\\n//\\n// MIT\\n\\n'

    """
    parts = []
    for line in lines:
        parts.append(f"{COMMENT_PREFIX} {line}" if line else COMMENT_PREFIX)
        parts.append("\n")
    parts.append("\n")
    return "".join(parts)


__all__ = ["format_license_header", "read_license_lines"]
