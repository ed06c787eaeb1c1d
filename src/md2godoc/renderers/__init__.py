#  Copyright (c) 2025 Tom Villani, Ph.D.
# md2godoc/renderers/__init__.py
"""Renderers that turn the md2godoc AST into output text."""

from md2godoc.renderers.base import BaseRenderer
from md2godoc.renderers.godoc import GodocRenderer

__all__ = ["BaseRenderer", "GodocRenderer"]
