#  Copyright (c) 2025 Tom Villani, Ph.D.
# md2godoc/parsers/__init__.py
"""Parsers that build the md2godoc AST from Markdown."""

from md2godoc.parsers.base import BaseParser
from md2godoc.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = ["BaseParser", "MarkdownToAstConverter", "markdown_to_ast"]
