#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and defaults for md2godoc.

This module centralizes the literal strings and default values shared by the
renderer, the parser, and the command line interface.
"""

from __future__ import annotations

# =============================================================================
# Go doc comment output
# =============================================================================

COMMENT_PREFIX = "//"
"""Marker that starts every line of the generated doc comment."""

PACKAGE_SENTENCE_TEMPLATE = "Package {package_name} is the"
PACKAGE_CLAUSE_TEMPLATE = "package {package_name}"

LIST_BULLET = "• "
CODE_INDENT = "  "
EMPHASIS_MARKER = "*"
STRONG_MARKER = "**"

DEFAULT_PACKAGE_NAME = "main"
DEFAULT_SUPPRESS_BADGES = True

# Go keywords cannot be used as package names
GO_KEYWORDS = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)

GO_LIST_COMMAND = ["go", "list", "-f", "{{.Name}}"]

# =============================================================================
# Markdown parsing
# =============================================================================

DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_FOOTNOTES = True
DEFAULT_PARSE_STRIKETHROUGH = False
DEFAULT_PARSE_FRONTMATTER = True

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]

# =============================================================================
# Command line defaults
# =============================================================================

DEFAULT_INPUT_FILE = "README.md"
DEFAULT_OUTPUT_FILE = "doc.go"
DEFAULT_LICENSE_FILE = "LICENSE.txt"
DEFAULT_LOG_LEVEL = "WARNING"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7
