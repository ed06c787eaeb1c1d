#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2godoc/utils/io_utils.py
"""Input and output helpers shared by the parser, the renderer and the CLI."""

from __future__ import annotations

import io
import logging
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

logger = logging.getLogger(__name__)

FALLBACK_ENCODINGS = ("utf-8-sig", "utf-8", "latin-1")


def decode_text(data: bytes) -> str:
    """Decode bytes, trying UTF-8 (with and without BOM) before latin-1.

    Parameters
    ----------
    data : bytes
        Raw input

    Returns
    -------
    str
        Decoded text

    """
    for encoding in FALLBACK_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            logger.debug("Input is not valid %s", encoding)
    # latin-1 accepts every byte sequence, so this is unreachable in practice
    return data.decode("utf-8", errors="replace")


def read_stream_text(stream: IO[bytes] | IO[str]) -> str:
    """Read a binary or text stream to the end and return text.

    Parameters
    ----------
    stream : IO[bytes] or IO[str]
        Stream to read (``sys.stdin``, ``sys.stdin.buffer``, BytesIO, ...)

    Returns
    -------
    str
        Stream content

    """
    data = stream.read()
    if isinstance(data, bytes):
        return decode_text(data)
    return data


def write_content(content: Union[str, bytes], output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write content to a file path or a file-like object.

    Parameters
    ----------
    content : str or bytes
        Content to write. Text is encoded as UTF-8 for binary destinations.
    output : str, Path, IO[bytes], or IO[str]
        Output destination

    Raises
    ------
    TypeError
        If output type is not supported or content is neither str nor bytes

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_content("package main\\n", buffer)
        >>> buffer.getvalue()
        b'package main\\n'

    """
    if not isinstance(content, (str, bytes)):
        raise TypeError(f"Content must be str or bytes, got {type(content)}")

    if isinstance(output, (str, Path)):
        output_path = Path(output)
        if isinstance(content, str):
            output_path.write_text(content, encoding="utf-8")
        else:
            output_path.write_bytes(content)
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if isinstance(output, BytesIO):
        is_binary_mode = True
    elif isinstance(output, StringIO):
        is_binary_mode = False
    elif isinstance(output, io.TextIOBase):
        is_binary_mode = False
    elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        is_binary_mode = True
    else:
        mode = getattr(output, "mode", "")
        is_binary_mode = isinstance(mode, str) and "b" in mode

    if is_binary_mode:
        binary_output = cast(IO[bytes], output)
        binary_output.write(content.encode("utf-8") if isinstance(content, str) else content)
    else:
        text_output = cast(IO[str], output)
        text_output.write(content.decode("utf-8") if isinstance(content, bytes) else content)


__all__ = ["decode_text", "read_stream_text", "write_content"]
