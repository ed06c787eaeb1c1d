#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2godoc/parsers/markdown.py
"""Markdown to AST converter.

This module converts Markdown documents to the md2godoc AST using the
mistune parser. mistune is run without a renderer so that it returns its
token stream, which is then mapped onto AST nodes.

"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import IO, Any, Union

import yaml

from md2godoc.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from md2godoc.constants import DEPS_MARKDOWN
from md2godoc.exceptions import ParsingError
from md2godoc.options.markdown import MarkdownParserOptions
from md2godoc.parsers.base import BaseParser
from md2godoc.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

YAML_DELIMITER = "---"
TOML_DELIMITER = "+++"


class MarkdownToAstConverter(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\\n\\nThis is **bold**.")

    With options:

        >>> options = MarkdownParserOptions(parse_tables=False)
        >>> converter = MarkdownToAstConverter(options)
        >>> doc = converter.parse(Path("README.md"))

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options
        self._footnote_definitions: dict[str, list[Node]] = {}

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse Markdown input into AST Document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            Markdown input to parse. Can be:
            - File path (str or Path)
            - File-like object in binary or text mode
            - Raw markdown bytes
            - Markdown string

        Returns
        -------
        Document
            AST document node, with front matter fields as its metadata

        Raises
        ------
        ParsingError
            If the front matter block is not valid YAML or TOML

        """
        markdown_content = self._load_text_content(input_data)

        self._footnote_definitions = {}

        markdown_content, frontmatter = self._extract_frontmatter(markdown_content)

        import mistune

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_footnotes:
            plugins.append("footnotes")

        markdown = mistune.create_markdown(plugins=plugins, renderer=None)
        tokens, _state = markdown.parse(markdown_content)

        children = self._process_tokens(tokens) if isinstance(tokens, list) else []

        for identifier, content in self._footnote_definitions.items():
            children.append(FootnoteDefinition(identifier=identifier, content=content))

        logger.debug("Parsed %d top-level blocks", len(children))
        return Document(children=children, metadata=frontmatter)

    # ------------------------------------------------------------------
    # Front matter
    # ------------------------------------------------------------------

    def _extract_frontmatter(self, content: str) -> tuple[str, dict[str, Any]]:
        """Strip a leading front matter block and parse it.

        Supports YAML (``---``) and TOML (``+++``) delimiters. A block whose
        closing delimiter is missing is left in place as ordinary Markdown.

        Parameters
        ----------
        content : str
            Markdown content that may start with front matter

        Returns
        -------
        tuple[str, dict]
            Content without the front matter, and the parsed fields

        Raises
        ------
        ParsingError
            If the block does not parse, or parses to something other than a
            mapping

        """
        if not self.options.parse_frontmatter:
            return content, {}

        for delimiter, loader in ((YAML_DELIMITER, self._load_yaml), (TOML_DELIMITER, self._load_toml)):
            block = self._split_frontmatter(content, delimiter)
            if block is None:
                continue
            raw, remaining = block
            data = loader(raw)
            if data is None:
                data = {}
            if not isinstance(data, dict):
                raise ParsingError(
                    f"Front matter must be a mapping, got {type(data).__name__}", parsing_stage="frontmatter"
                )
            logger.debug("Front matter fields: %s", ", ".join(map(str, data)) or "none")
            return remaining, data

        return content, {}

    @staticmethod
    def _split_frontmatter(content: str, delimiter: str) -> tuple[str, str] | None:
        if not (content.startswith(delimiter + "\n") or content.startswith(delimiter + "\r\n")):
            return None

        lines = content.splitlines(keepends=True)
        for i in range(1, len(lines)):
            if lines[i].strip() == delimiter:
                return "".join(lines[1:i]), "".join(lines[i + 1 :])
        return None

    @staticmethod
    def _load_yaml(raw: str) -> Any:
        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ParsingError(f"Invalid YAML front matter: {e}", parsing_stage="frontmatter", original_error=e) from e

    @staticmethod
    def _load_toml(raw: str) -> Any:
        try:
            return tomllib.loads(raw)
        except tomllib.TOMLDecodeError as e:
            raise ParsingError(f"Invalid TOML front matter: {e}", parsing_stage="frontmatter", original_error=e) from e

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes."""
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)

        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single mistune block token into an AST node.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node or None
            Resulting AST node, None for tokens with no node (blank lines,
            footnote definitions collected for the end of the document)

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is the body of a tight list item
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""))
        elif token_type == "footnotes":
            # container mistune emits for all definitions
            for child in token.get("children", []):
                self._process_footnote_def(child)
            return None
        elif token_type == "footnote_item":
            self._process_footnote_def(token)
            return None

        if token_type != "blank_line":
            logger.debug("Ignoring mistune token %r", token_type)
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1

        children = token.get("children", [])
        content = self._process_inline_tokens(children) if isinstance(children, list) else []
        return Heading(level=level, content=content)

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token.

        Parameters
        ----------
        token : dict
            Code block token with 'raw' and optional 'attrs'

        Returns
        -------
        CodeBlock
            Code block AST node; the language is the first word of the info string

        """
        attrs = token.get("attrs", {})
        info_string = (attrs.get("info") or "").strip() if isinstance(attrs, dict) else ""
        language = info_string.split(maxsplit=1)[0] if info_string else None

        metadata: dict[str, Any] = {}
        if info_string:
            metadata["info_string"] = info_string

        return CodeBlock(content=token.get("raw", ""), language=language, metadata=metadata)

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children', 'tight' and 'attrs' (ordered, start)

        Returns
        -------
        List
            List AST node

        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = attrs.get("ordered", False)
        start = attrs.get("start", 1)
        tight = token.get("tight", attrs.get("tight", True))

        children = token.get("children", [])
        if not isinstance(children, list):
            children = []

        items = [
            ListItem(children=self._process_tokens(child.get("children", [])))
            for child in children
            if isinstance(child, dict)
        ]
        return List(ordered=ordered, items=items, start=start, tight=tight)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token.

        mistune puts header cells directly under ``table_head`` and body cells
        under ``table_row`` tokens inside ``table_body``.

        Parameters
        ----------
        token : dict
            Table token with 'children'

        Returns
        -------
        Table
            Table AST node

        """
        header = None
        rows = []
        alignments: list = []

        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                cells = self._process_table_cells(section.get("children", []))
                header = TableRow(cells=cells, is_header=True)
                alignments = [cell.alignment for cell in cells]
            elif section_type == "table_body":
                for row_token in section.get("children", []):
                    rows.append(TableRow(cells=self._process_table_cells(row_token.get("children", []))))

        return Table(header=header, rows=rows, alignments=alignments)

    def _process_table_cells(self, cell_tokens: list[dict[str, Any]]) -> list[TableCell]:
        cells = []
        for cell_token in cell_tokens:
            if cell_token.get("type") != "table_cell":
                continue
            attrs = cell_token.get("attrs", {})
            cells.append(
                TableCell(
                    content=self._process_inline_tokens(cell_token.get("children", [])),
                    alignment=attrs.get("align") if isinstance(attrs, dict) else None,
                )
            )
        return cells

    def _process_footnote_def(self, token: dict[str, Any]) -> None:
        """Store a footnote definition for the end of the document."""
        attrs = token.get("attrs", {})
        identifier = attrs.get("key") or attrs.get("label", "")
        self._footnote_definitions[identifier] = self._process_tokens(token.get("children", []))

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries

        Returns
        -------
        list of Node
            Inline AST nodes

        """
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)

        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        """Handle text token."""
        return Text(content=token.get("raw", ""))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        """Handle strong token."""
        return Strong(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        """Handle emphasis token."""
        return Emphasis(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        """Handle codespan token."""
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        """Handle link token."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        children = token.get("children", [])
        if not isinstance(children, list):
            children = []
        return Link(
            url=attrs.get("url", ""),
            content=self._process_inline_tokens(children),
            title=attrs.get("title", None),
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token; the alt text lives in the token's children."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        children = token.get("children", [])
        alt_text = ""
        if isinstance(children, list):
            alt_text = "".join(
                child.get("raw", "") for child in children if isinstance(child, dict) and child.get("type") == "text"
            )
        return Image(url=attrs.get("url", ""), alt_text=alt_text, title=attrs.get("title", None))

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        """Handle hard linebreak token."""
        return LineBreak(soft=False)

    def _handle_softbreak_token(self, token: dict[str, Any]) -> LineBreak:
        """Handle softbreak token."""
        return LineBreak(soft=True)

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        """Handle strikethrough token."""
        return Strikethrough(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        """Handle inline_html token."""
        return HTMLInline(content=token.get("raw", ""))

    def _handle_footnote_ref_token(self, token: dict[str, Any]) -> FootnoteReference:
        """Handle footnote_ref token."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return FootnoteReference(identifier=token.get("raw") or attrs.get("label", ""))

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node or None
            Inline AST node, None for unrecognized tokens

        """
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "strikethrough": self._handle_strikethrough_token,
            "inline_html": self._handle_inline_html_token,
            "footnote_ref": self._handle_footnote_ref_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)
        logger.debug("Ignoring inline mistune token %r", token_type)
        return None


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert a Markdown string to AST.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> from md2godoc.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\\n\\nWorld")
    >>> len(doc.children)
    2

    """
    converter = MarkdownToAstConverter(options)
    return converter.parse(markdown_content)
