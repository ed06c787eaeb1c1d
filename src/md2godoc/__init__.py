"""md2godoc - convert Markdown READMEs into Go package documentation.

md2godoc parses a Markdown document with mistune into a small AST and renders
that AST as a Go ``doc.go`` file: a ``//`` doc comment beginning
``Package <name> is the ...`` followed by the package clause. Go tooling shows
this comment as the package overview, so a project's README and its godoc
page can come from a single source.

Examples
--------
Convert Markdown text:

    >>> from md2godoc import markdown_to_godoc
    >>> print(markdown_to_godoc("# Markdown to Godoc converter", "main"), end="")
    // Package main is the Markdown to Godoc converter
    package main

Render a tree built by hand:

    >>> from md2godoc import render_godoc
    >>> from md2godoc.ast import Document, Heading, Text
    >>> render_godoc(Document(children=[Heading(level=1, content=[Text(content="tool")])]), "tool")
    b'// Package tool is the tool\\npackage tool\\n'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "0.1.0"

from md2godoc.api import markdown_to_godoc, render_godoc
from md2godoc.exceptions import (
    DependencyError,
    FileError,
    Md2GodocError,
    PackageNameError,
    ParsingError,
    RenderingError,
    UnsupportedNodeKindError,
    ValidationError,
)
from md2godoc.options import GodocRendererOptions, MarkdownParserOptions
from md2godoc.package_name import infer_package_name, validate_package_name
from md2godoc.parsers.markdown import MarkdownToAstConverter
from md2godoc.renderers.godoc import GodocRenderer

__all__ = [
    "__version__",
    "markdown_to_godoc",
    "render_godoc",
    "GodocRenderer",
    "GodocRendererOptions",
    "MarkdownToAstConverter",
    "MarkdownParserOptions",
    "infer_package_name",
    "validate_package_name",
    "Md2GodocError",
    "ValidationError",
    "PackageNameError",
    "FileError",
    "ParsingError",
    "RenderingError",
    "UnsupportedNodeKindError",
    "DependencyError",
]
