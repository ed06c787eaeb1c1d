#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2godoc/cli.py
"""Command-line interface for md2godoc.

Reads a Markdown file (``README.md`` by default) and writes the equivalent Go
package documentation to ``doc.go`` beside it.

Examples
--------
Convert the README in the current directory::

    $ md2godoc

Convert a README elsewhere; ``doc.go`` is written next to it::

    $ md2godoc --input pkg/foo/README.md

Pipe through, naming the package explicitly::

    $ cat README.md | md2godoc --stdin --stdout --pkg foo

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import fields
from pathlib import Path

from md2godoc import __version__
from md2godoc.constants import (
    DEFAULT_INPUT_FILE,
    DEFAULT_LICENSE_FILE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_FILE,
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from md2godoc.exceptions import (
    DependencyError,
    FileError,
    FileNotFoundError,
    Md2GodocError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2godoc.license import format_license_header, read_license_lines
from md2godoc.logging_utils import configure_logging, resolve_log_level
from md2godoc.options.godoc import GodocRendererOptions
from md2godoc.package_name import infer_package_name, validate_package_name
from md2godoc.parsers.markdown import MarkdownToAstConverter
from md2godoc.renderers.godoc import GodocRenderer
from md2godoc.utils.io_utils import read_stream_text, write_content

logger = logging.getLogger(__name__)


def _option_help(options_class: type, field_name: str) -> str:
    for option_field in fields(options_class):
        if option_field.name == field_name:
            return option_field.metadata.get("help", "")
    return ""


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="md2godoc",
        description="Convert a Markdown README into Go package documentation (doc.go).",
    )
    parser.add_argument("--input", default=DEFAULT_INPUT_FILE, help="Path to markdown file to parse")
    parser.add_argument("--output", default=DEFAULT_OUTPUT_FILE, help="Path to write file to")
    parser.add_argument("--stdout", action="store_true", help="Write to STDOUT instead of a file")
    parser.add_argument("--stdin", action="store_true", help="Read from STDIN instead of a file")
    parser.add_argument(
        "--pkg",
        default="",
        help=f"{_option_help(GodocRendererOptions, 'package_name')}. If empty, infer from directory of input",
    )
    parser.add_argument(
        "--license",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Add license header from file",
    )
    parser.add_argument(
        "--license-file",
        "--licenseFile",
        dest="license_file",
        default=DEFAULT_LICENSE_FILE,
        help="File to read license header from",
    )
    parser.add_argument("--badges", action="store_true", help="Enable output for badges (links with images)")

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: %(default)s)",
    )
    logging_group.add_argument("--log-file", help="Also write log records to this file")
    logging_group.add_argument("--verbose", "-v", action="store_true", help="Shortcut for --log-level DEBUG")
    logging_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to a CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map

    Returns
    -------
    int
        Exit code for the exception type

    """
    if isinstance(exception, DependencyError):
        return EXIT_DEPENDENCY_ERROR
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, (FileError, OutputWriteError)):
        return EXIT_FILE_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def resolve_output_path(input_file: str, output_file: str) -> str:
    """Place the default ``doc.go`` next to an input file in another directory.

    An explicitly chosen output path is returned unchanged.

    Examples
    --------
        >>> resolve_output_path("pkg/foo/README.md", "doc.go")
        'pkg/foo/doc.go'
        >>> resolve_output_path("pkg/foo/README.md", "out.go")
        'out.go'

    """
    input_dir = os.path.dirname(input_file) or "."
    if input_dir != "." and output_file == DEFAULT_OUTPUT_FILE:
        return os.path.join(input_dir, output_file)
    return output_file


def _read_input(parsed_args: argparse.Namespace) -> bytes:
    if parsed_args.stdin:
        logger.debug("Reading Markdown from stdin")
        return read_stream_text(getattr(sys.stdin, "buffer", sys.stdin)).encode("utf-8")

    input_path = Path(parsed_args.input)
    if not input_path.is_file():
        raise FileNotFoundError(str(input_path), message=f"Could not read input file: {input_path}")
    try:
        return input_path.read_bytes()
    except OSError as e:
        raise FileError(f"Could not read input file: {e}", file_path=str(input_path), original_error=e) from e


def _package_name(parsed_args: argparse.Namespace) -> str:
    name = parsed_args.pkg or infer_package_name(parsed_args.input)
    return validate_package_name(name)


def _license_header(parsed_args: argparse.Namespace) -> str:
    if not parsed_args.license:
        return ""
    if not os.path.isfile(parsed_args.license_file):
        logger.debug("No license file at %s, skipping header", parsed_args.license_file)
        return ""
    return format_license_header(read_license_lines(parsed_args.license_file))


def _write_output(parsed_args: argparse.Namespace, content: str) -> None:
    if parsed_args.stdout:
        write_content(content, sys.stdout)
        sys.stdout.flush()
        return

    output_path = resolve_output_path(parsed_args.input, parsed_args.output)
    try:
        write_content(content, output_path)
    except OSError as e:
        raise OutputWriteError(output_path, original_error=e) from e
    logger.info("Wrote %s", output_path)


def convert(parsed_args: argparse.Namespace) -> None:
    """Run one conversion as described by the parsed arguments.

    The complete output (license header and documentation) is built before
    anything is written.

    Raises
    ------
    Md2GodocError
        On any failure; see get_exit_code_for_exception for the mapping to
        exit codes

    """
    markdown_source = _read_input(parsed_args)
    package_name = _package_name(parsed_args)

    document = MarkdownToAstConverter().parse(markdown_source)
    renderer = GodocRenderer(GodocRendererOptions(package_name=package_name, suppress_badges=not parsed_args.badges))
    body = renderer.render_to_string(document)

    _write_output(parsed_args, _license_header(parsed_args) + body)


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return an exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    log_level = resolve_log_level(parsed_args.log_level, verbose=parsed_args.verbose, trace=parsed_args.trace)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        convert(parsed_args)
    except Md2GodocError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
