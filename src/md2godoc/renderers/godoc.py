#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2godoc/renderers/godoc.py
"""Go package documentation rendering from AST.

This module provides the GodocRenderer class which turns a Markdown AST into
the text of a Go ``doc.go`` file: a ``//`` doc comment that opens with the
sentence ``Package <name> is the ...`` and ends with the package clause.

Output conventions:
- The first heading of the document completes the opening sentence; a
  document that starts with anything else gets a period instead
- Paragraphs, headings and code blocks are separated by one blank ``//`` line
- Code blocks are indented, list items are prefixed with a bullet
- Emphasis keeps its ``*``/``**`` markers, inline code loses its backticks
- Links render as ``text (url)``; links wrapping images (badges) are dropped
  unless badge output is enabled, and images are never rendered
- Tables, block quotes, raw HTML, rules and footnotes are dropped

The renderer writes tokens in traversal order. Line breaks are requested
rather than written: a run of requests collapses to at most one blank comment
line, and breaks still pending when the document ends are discarded.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Union

from md2godoc.ast.nodes import (
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
from md2godoc.ast.visitors import NodeVisitor
from md2godoc.constants import (
    CODE_INDENT,
    COMMENT_PREFIX,
    EMPHASIS_MARKER,
    LIST_BULLET,
    PACKAGE_CLAUSE_TEMPLATE,
    PACKAGE_SENTENCE_TEMPLATE,
    STRONG_MARKER,
)
from md2godoc.exceptions import UnsupportedNodeKindError
from md2godoc.options.godoc import GodocRendererOptions
from md2godoc.renderers.base import BaseRenderer

logger = logging.getLogger(__name__)

# One blank comment line at most
MAX_PENDING_BREAKS = 2

_WriterState = tuple[int, bool, bool, int, str, bool]


class GodocRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes to Go package documentation.

    A renderer instance keeps its traversal state on ``self`` and resets it at
    the start of every render, so one instance must not be shared between
    threads rendering concurrently.

    Parameters
    ----------
    options : GodocRendererOptions or None, default = None
        Go doc rendering options (package name, badge suppression)

    Examples
    --------
        >>> from md2godoc.ast import Document, Heading, Paragraph, Text
        >>> from md2godoc.options import GodocRendererOptions
        >>> doc = Document(children=[
        ...     Heading(level=1, content=[Text(content="Markdown to Godoc converter.")]),
        ...     Paragraph(content=[Text(content="Way, way alpha.")]),
        ... ])
        >>> renderer = GodocRenderer(GodocRendererOptions(package_name="main"))
        >>> print(renderer.render_to_string(doc), end="")
        // Package main is the Markdown to Godoc converter.
        //
        // Way, way alpha.
        package main

    """

    def __init__(self, options: GodocRendererOptions | None = None):
        """Initialize the Go doc renderer with options."""
        BaseRenderer._validate_options_type(options, GodocRendererOptions, "godoc")
        options = options or GodocRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: GodocRendererOptions = options
        self._reset_state()

    def _reset_state(self) -> None:
        self._output: list[str] = []
        self._header_consumed = False
        self._completing_sentence = False
        self._last_len = 0
        self._last_text = ""
        self._in_link = False
        self._image_in_link = False
        self._continuation_space = False
        self._pending_breaks = 0
        self._soft_space = False

    def render_to_string(self, document: Node) -> str:
        """Render a document AST to the text of a ``doc.go`` file.

        Parameters
        ----------
        document : Node
            Root node, normally a Document

        Returns
        -------
        str
            Doc comment followed by the package clause

        Raises
        ------
        UnsupportedNodeKindError
            If the tree contains a node kind the renderer has no rule for

        """
        self._reset_state()
        self._document_header()
        # a bare fragment continues the sentence directly
        self._header_consumed = not isinstance(document, Document)
        document.accept(self)
        self._document_footer()
        return "".join(self._output)

    def render_to_bytes(self, doc: Node) -> bytes:
        """Render a document AST to UTF-8 encoded ``doc.go`` content."""
        return self.render_to_string(doc).encode("utf-8")

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render AST to Go doc text and write it to output.

        The whole document is rendered before anything is written, so a
        failed render leaves ``output`` untouched.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination (file path or file-like object)

        """
        text = self.render_to_string(doc)
        self.write_text_output(text, output)

    # ------------------------------------------------------------------
    # Writer primitives
    # ------------------------------------------------------------------

    def _document_header(self) -> None:
        sentence = PACKAGE_SENTENCE_TEMPLATE.format(package_name=self.options.package_name)
        self._output.append(f"{COMMENT_PREFIX} {sentence}")
        # the word that completes the sentence needs a separating space
        self._continuation_space = True

    def _document_footer(self) -> None:
        clause = PACKAGE_CLAUSE_TEMPLATE.format(package_name=self.options.package_name)
        self._output.append(f"\n{clause}\n")

    def _out(self, text: str) -> None:
        """Write one token, resolving pending line breaks and spacing first.

        The first token of the document closes the opening sentence with a
        period, unless it belongs to the heading that completes the sentence.
        """
        if not text:
            return

        if not self._header_consumed:
            self._header_consumed = True
            if not self._completing_sentence:
                self._out(".")
                self._paragraph_break()

        if self._pending_breaks:
            self._output.append(f"\n{COMMENT_PREFIX}" * self._pending_breaks)
            self._pending_breaks = 0
            self._continuation_space = True

        if self._continuation_space:
            self._output.append(" ")
        elif self._soft_space and not self._last_text.endswith(" ") and not text.startswith(" "):
            self._output.append(" ")
        self._continuation_space = False
        self._soft_space = False

        self._output.append(text)
        self._last_len = len(text)
        self._last_text = text

    def _cr(self) -> None:
        """Request a line break.

        Nothing is requested before the first token, and requests beyond
        MAX_PENDING_BREAKS are dropped.
        """
        if self._last_len > 0 and self._pending_breaks < MAX_PENDING_BREAKS:
            self._pending_breaks += 1
        self._soft_space = False

    def _paragraph_break(self) -> None:
        self._cr()
        self._cr()

    def _at_line_start(self) -> bool:
        return self._pending_breaks > 0 or self._continuation_space

    def _close_sentence(self) -> None:
        self._header_consumed = True
        self._out(".")
        self._paragraph_break()

    def _snapshot(self) -> _WriterState:
        return (
            self._pending_breaks,
            self._continuation_space,
            self._soft_space,
            self._last_len,
            self._last_text,
            self._header_consumed,
        )

    def _restore(self, state: _WriterState) -> None:
        (
            self._pending_breaks,
            self._continuation_space,
            self._soft_space,
            self._last_len,
            self._last_text,
            self._header_consumed,
        ) = state

    def _render_inline_content(self, content: list[Node]) -> None:
        for child in content:
            child.accept(self)

    def _skip(self, node: Node) -> None:
        logger.debug("Dropping unsupported %s from Go doc output", type(node).__name__)

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document node.

        The opening sentence is completed by the first heading if nothing was
        written before it, and by a period otherwise. Blocks that render
        nothing (dropped constructs, badge-only paragraphs, empty headings)
        leave the sentence open.

        Parameters
        ----------
        node : Document
            Document to render

        """
        for child in node.children:
            child.accept(self)

        if not self._header_consumed:
            self._close_sentence()

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node as a line of its own.

        Parameters
        ----------
        node : Heading
            Heading to render

        """
        if self._header_consumed:
            self._paragraph_break()
            self._render_inline_content(node.content)
        else:
            self._completing_sentence = True
            try:
                self._render_inline_content(node.content)
            finally:
                self._completing_sentence = False
        self._paragraph_break()

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node followed by a blank comment line."""
        self._render_inline_content(node.content)
        self._paragraph_break()

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node as an indented block.

        Blank lines inside the block are kept, while blank lines at either end
        are dropped.

        Parameters
        ----------
        node : CodeBlock
            Code block to render

        """
        self._paragraph_break()

        lines = [line.rstrip() for line in node.content.splitlines()]
        while lines and not lines[0]:
            lines.pop(0)
        while lines and not lines[-1]:
            lines.pop()

        for line in lines:
            if line:
                self._out(CODE_INDENT + line)
            # blank code lines are not collapsed
            self._pending_breaks += 1
        self._cr()

    def visit_list(self, node: List) -> None:
        """Render a List node, one bullet per item.

        Every item after the first starts on a fresh line.

        Parameters
        ----------
        node : List
            List to render

        """
        for index, item in enumerate(node.items):
            if index > 0:
                self._cr()
            item.accept(self)
        self._cr()

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node."""
        self._out(LIST_BULLET)
        for child in node.children:
            child.accept(self)
        self._cr()

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Skip a BlockQuote node."""
        self._skip(node)

    def visit_table(self, node: Table) -> None:
        """Skip a Table node; tables have no Go doc equivalent."""
        self._skip(node)

    def visit_table_row(self, node: TableRow) -> None:
        """Skip a TableRow node."""
        self._skip(node)

    def visit_table_cell(self, node: TableCell) -> None:
        """Skip a TableCell node."""
        self._skip(node)

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Skip a ThematicBreak node."""
        self._skip(node)

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Skip an HTMLBlock node."""
        self._skip(node)

    def visit_footnote_definition(self, node: FootnoteDefinition) -> None:
        """Skip a FootnoteDefinition node."""
        self._skip(node)

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a Text node.

        Each line loses exactly one trailing space. A space stripped from the
        last line is written before the next token on the same line.

        Text starting a comment line is also left-stripped: gofmt treats an
        indented comment line as a preformatted code block, so only
        CodeBlock nodes may produce one.

        Parameters
        ----------
        node : Text
            Text to render

        """
        lines = node.content.split("\n")
        last = len(lines) - 1
        for index, line in enumerate(lines):
            if index > 0:
                self._cr()
            stripped = line.endswith(" ")
            if stripped:
                line = line[:-1]
            if self._at_line_start():
                line = line.lstrip()
            self._out(line)
            if stripped and index == last:
                self._soft_space = True

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node as ``*text*``."""
        self._soft_space = True
        self._out(EMPHASIS_MARKER)
        self._render_inline_content(node.content)
        self._out(EMPHASIS_MARKER)

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node as ``**text**``."""
        self._soft_space = True
        self._out(STRONG_MARKER)
        self._render_inline_content(node.content)
        self._out(STRONG_MARKER)

    def visit_code(self, node: Code) -> None:
        """Render a Code node as its bare content."""
        self._out(node.content)

    def visit_link(self, node: Link) -> None:
        """Render a Link node as ``title text (url)``.

        The link is rendered into a separate buffer first. If an image turned
        up inside it and badges are suppressed, the buffer is discarded and the
        writer state is rolled back, so a badge leaves no trace in the output.

        Parameters
        ----------
        node : Link
            Link to render

        """
        state = self._snapshot()
        saved_output = self._output
        self._output = []
        self._in_link = True
        self._image_in_link = False
        try:
            if node.title:
                self._out(node.title)
                self._soft_space = True
            self._render_inline_content(node.content)
            link_output = self._output
        finally:
            self._output = saved_output
            self._in_link = False

        if self._image_in_link and self.options.suppress_badges:
            logger.debug("Suppressing badge link to %s", node.url)
            self._restore(state)
        else:
            self._output.extend(link_output)
            if node.url:
                self._soft_space = True
                self._out(f"({node.url})")
        self._image_in_link = False

    def visit_image(self, node: Image) -> None:
        """Record an Image node inside a link; images themselves are never rendered."""
        if self._in_link:
            self._image_in_link = True

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node: one break when soft, two when hard."""
        self._cr()
        if not node.soft:
            self._cr()

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Reject a Strikethrough node; Go doc comments have no such markup."""
        self.generic_visit(node)

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Skip an HTMLInline node."""
        self._skip(node)

    def visit_footnote_reference(self, node: FootnoteReference) -> None:
        """Skip a FootnoteReference node."""
        self._skip(node)

    def generic_visit(self, node: Node) -> None:
        """Fail on any node kind without a rendering rule.

        Raises
        ------
        UnsupportedNodeKindError
            Always

        """
        raise UnsupportedNodeKindError(type(node).__name__)
