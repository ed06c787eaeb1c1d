#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2godoc/parsers/base.py
"""Base class for document parsers.

A parser turns some input (a path, raw bytes, a stream or text) into the
md2godoc AST that renderers consume.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2godoc.ast import Document
from md2godoc.exceptions import FileError, FileNotFoundError, InvalidOptionsError
from md2godoc.options.base import BaseParserOptions
from md2godoc.utils.io_utils import decode_text, read_stream_text

logger = logging.getLogger(__name__)

# Longest string still probed as a file path
MAX_PATH_PROBE_LENGTH = 260


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method should handle all supported input types:
    - str or Path: File path to read (a str that is not an existing file is
      treated as document content)
    - IO[bytes] or IO[str]: File-like object
    - bytes: Raw document bytes

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse the input document into an AST.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            Document to parse

        Returns
        -------
        Document
            AST root node

        Raises
        ------
        ParsingError
            If the input cannot be parsed

        """
        pass

    @staticmethod
    def _load_text_content(input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> str:
        """Load text from any supported input type.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            Input data to load

        Returns
        -------
        str
            Document text

        Raises
        ------
        FileNotFoundError
            If a Path does not exist
        FileError
            If a file cannot be read

        """
        if isinstance(input_data, bytes):
            return decode_text(input_data)
        elif isinstance(input_data, Path):
            if not input_data.is_file():
                raise FileNotFoundError(str(input_data))
            return BaseParser._read_file(input_data)
        elif isinstance(input_data, str):
            if len(input_data) <= MAX_PATH_PROBE_LENGTH and "\n" not in input_data:
                try:
                    path = Path(input_data)
                    is_file = path.is_file()
                except OSError:
                    is_file = False
                if is_file:
                    return BaseParser._read_file(path)
            return input_data
        else:
            return read_stream_text(input_data)

    @staticmethod
    def _read_file(path: Path) -> str:
        try:
            data = path.read_bytes()
        except OSError as e:
            raise FileError(f"Cannot read {path}: {e}", file_path=str(path), original_error=e) from e
        logger.debug("Read %d bytes from %s", len(data), path)
        return decode_text(data)
