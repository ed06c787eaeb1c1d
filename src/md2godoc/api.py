#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2godoc/api.py
"""High-level conversion functions.

These wrap the Markdown parser and the Go doc renderer for callers that do
not need to build options objects themselves.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Optional, Union

from md2godoc.ast.nodes import Document
from md2godoc.options.godoc import GodocRendererOptions
from md2godoc.options.markdown import MarkdownParserOptions
from md2godoc.package_name import validate_package_name
from md2godoc.parsers.markdown import MarkdownToAstConverter
from md2godoc.renderers.godoc import GodocRenderer
from md2godoc.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def render_godoc(doc: Document, package_name: str, *, suppress_badges: bool = True) -> bytes:
    """Render a document tree to ``doc.go`` content.

    Parameters
    ----------
    doc : Document
        AST to render
    package_name : str
        Go package name used in the opening sentence and the package clause
    suppress_badges : bool, default True
        Drop links that wrap images

    Returns
    -------
    bytes
        UTF-8 encoded Go source

    Raises
    ------
    PackageNameError
        If ``package_name`` is not a valid Go package name
    UnsupportedNodeKindError
        If the tree contains a node kind the renderer has no rule for

    Examples
    --------
        >>> from md2godoc.ast import Document, Paragraph, Text
        >>> render_godoc(Document(children=[Paragraph(content=[Text(content="Hi.")])]), "demo")
        b'// Package demo is the .\\n//\\n// Hi.\\npackage demo\\n'

    """
    validate_package_name(package_name)
    options = GodocRendererOptions(package_name=package_name, suppress_badges=suppress_badges)
    with debug_timer(logger, "Rendering (godoc)"):
        return GodocRenderer(options).render_to_bytes(doc)


def markdown_to_godoc(
    source: Union[str, Path, IO[bytes], IO[str], bytes],
    package_name: str,
    *,
    suppress_badges: bool = True,
    parser_options: Optional[MarkdownParserOptions] = None,
) -> str:
    """Convert Markdown to ``doc.go`` content.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str] or bytes
        Markdown text, a path to a Markdown file, raw bytes or a stream
    package_name : str
        Go package name
    suppress_badges : bool, default True
        Drop links that wrap images
    parser_options : MarkdownParserOptions or None, default None
        Markdown parser configuration

    Returns
    -------
    str
        Go source: doc comment followed by the package clause

    Raises
    ------
    PackageNameError
        If ``package_name`` is not a valid Go package name
    ParsingError
        If the front matter cannot be parsed
    UnsupportedNodeKindError
        If the Markdown produced a node kind the renderer rejects

    Examples
    --------
        >>> print(markdown_to_godoc("# Markdown to Godoc converter", "main"), end="")
        // Package main is the Markdown to Godoc converter
        package main

    """
    validate_package_name(package_name)

    with debug_timer(logger, "Parsing (markdown)"):
        doc = MarkdownToAstConverter(parser_options).parse(source)

    options = GodocRendererOptions(package_name=package_name, suppress_badges=suppress_badges)
    with debug_timer(logger, "Rendering (godoc)"):
        return GodocRenderer(options).render_to_string(doc)


__all__ = ["markdown_to_godoc", "render_godoc"]
