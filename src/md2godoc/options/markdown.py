#  Copyright (c) 2025 Tom Villani, Ph.D.
# md2godoc/options/markdown.py
"""Configuration options for Markdown parsing."""

from dataclasses import dataclass, field

from md2godoc.constants import (
    DEFAULT_PARSE_FOOTNOTES,
    DEFAULT_PARSE_FRONTMATTER,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_TABLES,
)
from md2godoc.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Recognize GFM tables. The Go doc renderer drops them, but parsing
        keeps their cell text out of the surrounding paragraphs.
    parse_footnotes : bool, default True
        Recognize footnote references and definitions.
    parse_strikethrough : bool, default False
        Recognize ``~~strikethrough~~``. Go doc comments have no such markup
        and the renderer rejects Strikethrough nodes, so this is off by default.
    parse_frontmatter : bool, default True
        Strip a leading YAML (``---``) or TOML (``+++``) front matter block
        and store its fields as document metadata.

    """

    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse GFM tables", "cli_name": "no-parse-tables", "importance": "advanced"},
    )
    parse_footnotes: bool = field(
        default=DEFAULT_PARSE_FOOTNOTES,
        metadata={"help": "Parse footnotes", "cli_name": "no-parse-footnotes", "importance": "advanced"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={"help": "Parse ~~strikethrough~~ syntax", "importance": "advanced"},
    )
    parse_frontmatter: bool = field(
        default=DEFAULT_PARSE_FRONTMATTER,
        metadata={"help": "Strip YAML/TOML front matter", "cli_name": "no-parse-frontmatter", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()
