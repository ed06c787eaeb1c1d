#  Copyright (c) 2025 Tom Villani, Ph.D.
# md2godoc/options/__init__.py
"""Configuration options for md2godoc parsers and renderers."""

from md2godoc.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2godoc.options.godoc import GodocRendererOptions
from md2godoc.options.markdown import MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "GodocRendererOptions",
    "MarkdownParserOptions",
]
