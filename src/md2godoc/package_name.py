#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2godoc/package_name.py
"""Go package name validation and inference.

The package name appears twice in every rendered file, in the opening
sentence of the doc comment and in the package clause. When the caller does
not supply one, it is taken from the Go toolchain, which reports the name of
the package declared by the ``.go`` files next to the input.

"""

from __future__ import annotations

import logging
import os
import subprocess
import unicodedata
from pathlib import Path
from typing import Union

from md2godoc.constants import GO_KEYWORDS, GO_LIST_COMMAND
from md2godoc.exceptions import PackageNameError

logger = logging.getLogger(__name__)


def _is_go_letter(char: str) -> bool:
    return char == "_" or unicodedata.category(char).startswith("L")


def validate_package_name(name: str) -> str:
    """Check that ``name`` is usable as a Go package name.

    A valid name is a Go identifier (a letter or ``_`` followed by letters,
    decimal digits and ``_``) that is not a Go keyword.

    Parameters
    ----------
    name : str
        Candidate package name

    Returns
    -------
    str
        The name, unchanged

    Raises
    ------
    PackageNameError
        If the name is empty, not an identifier, or a keyword

    Examples
    --------
        >>> validate_package_name("md2godoc")
        'md2godoc'

    """
    if not isinstance(name, str) or not name:
        raise PackageNameError("Package name must be a non-empty string", package_name=name)

    if not _is_go_letter(name[0]):
        raise PackageNameError(f"Package name {name!r} must start with a letter or underscore", package_name=name)

    for char in name[1:]:
        if not (_is_go_letter(char) or unicodedata.category(char) == "Nd"):
            raise PackageNameError(f"Package name {name!r} contains invalid character {char!r}", package_name=name)

    if name in GO_KEYWORDS:
        raise PackageNameError(f"Package name {name!r} is a Go keyword", package_name=name)

    return name


def _package_dir_argument(input_path: Union[str, Path]) -> str:
    directory = os.path.dirname(str(input_path)) or "."
    if not os.path.isabs(directory) and directory != ".":
        # go list treats bare relative names as import paths
        directory = "./" + directory
    return directory


def infer_package_name(input_path: Union[str, Path]) -> str:
    """Ask the Go toolchain for the package declared next to ``input_path``.

    Runs ``go list -f {{.Name}} <dir>`` where ``<dir>`` is the directory of
    the input file.

    Parameters
    ----------
    input_path : str or Path
        Path of the Markdown input file

    Returns
    -------
    str
        Package name reported by ``go list``

    Raises
    ------
    PackageNameError
        If ``go`` is not installed, the command fails, or it prints nothing

    """
    command = [*GO_LIST_COMMAND, _package_dir_argument(input_path)]
    logger.debug("Inferring package name: %s", " ".join(command))

    try:
        result = subprocess.run(command, capture_output=True, text=True, check=True)
    except FileNotFoundError as e:
        logger.error("Unable to run: %s", command)
        raise PackageNameError(
            "Cannot infer the package name: the 'go' command was not found; pass the name explicitly",
            original_error=e,
        ) from e
    except subprocess.CalledProcessError as e:
        logger.error("Unable to run: %s", command)
        logger.error("%s", (e.stderr or e.stdout or "").strip())
        raise PackageNameError(
            f"Cannot infer the package name: 'go list' exited with status {e.returncode}",
            original_error=e,
        ) from e

    name = result.stdout.strip()
    if not name:
        raise PackageNameError("Cannot infer the package name: 'go list' printed nothing")
    return name


__all__ = ["infer_package_name", "validate_package_name"]
