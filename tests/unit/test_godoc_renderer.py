#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_godoc_renderer.py
"""Unit tests for GodocRenderer.

Tests cover:
- The opening package sentence and the trailing package clause
- Paragraph, heading, list and code block layout
- Line break collapsing and spacing around inline markup
- Links and badge suppression
- Silently dropped constructs and fatal unsupported node kinds
- Output destinations

"""

from dataclasses import dataclass, field
from io import BytesIO, StringIO
from typing import Any, Optional

import pytest

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
    SourceLocation,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from md2godoc.exceptions import InvalidOptionsError, RenderingError, UnsupportedNodeKindError
from md2godoc.options import GodocRendererOptions, MarkdownParserOptions
from md2godoc.renderers.godoc import GodocRenderer


def _render(*children: Node, package_name: str = "main", suppress_badges: bool = True) -> str:
    options = GodocRendererOptions(package_name=package_name, suppress_badges=suppress_badges)
    return GodocRenderer(options).render_to_string(Document(children=list(children)))


def _body_lines(output: str) -> list[str]:
    """Return the comment lines between the opening sentence and the package clause."""
    return output.splitlines()[1:-1]


def _badge() -> Link:
    return Link(
        url="https://travis-ci.org/sectioneight/md-to-godoc",
        content=[Image(url="https://travis-ci.org/sectioneight/md-to-godoc.svg", alt_text="Build Status")],
        title="Build Status",
    )


@dataclass
class Admonition(Node):
    """Node kind the renderer has no rule for."""

    text: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.generic_visit(self)


@pytest.mark.unit
class TestPackageSentence:
    """Tests for the opening sentence and the package clause."""

    def test_empty_document(self) -> None:
        """An empty document closes the sentence with a period."""
        assert _render(package_name="x") == "// Package x is the .\npackage x\n"

    def test_leading_heading_completes_sentence(self) -> None:
        """A first heading completes the sentence without a period."""
        result = _render(Heading(level=1, content=[Text(content="thing")]), package_name="demo")
        assert result == "// Package demo is the thing\npackage demo\n"

    def test_heading_with_trailing_period(self, simple_document: Document) -> None:
        """Heading text is written verbatim, including its own punctuation."""
        result = GodocRenderer().render_to_string(simple_document)
        assert result == (
            "// Package main is the Markdown to Godoc converter.\n"
            "//\n"
            "// Way, way alpha.\n"
            "package main\n"
        )

    def test_leading_paragraph_gets_period(self) -> None:
        """A document that opens with a paragraph closes the sentence first."""
        result = _render(Paragraph(content=[Text(content="Hello world")]))
        assert result == "// Package main is the .\n//\n// Hello world\npackage main\n"

    def test_only_first_heading_completes_sentence(self) -> None:
        """A heading after other content is an ordinary line."""
        result = _render(
            Paragraph(content=[Text(content="Intro")]),
            Heading(level=1, content=[Text(content="Title")]),
        )
        assert result.splitlines()[0] == "// Package main is the ."
        assert "// Title" in result.splitlines()

    def test_badge_only_heading_leaves_sentence_open(self) -> None:
        """A first heading that renders nothing lets the next block close the sentence."""
        result = _render(
            Heading(level=1, content=[Link(url="u", content=[Image(url="i")])]),
            Paragraph(content=[Text(content="Body")]),
        )
        assert result == "// Package main is the .\n//\n// Body\npackage main\n"

    def test_empty_heading_gets_period(self) -> None:
        """An empty first heading does not complete the sentence."""
        assert _render(Heading(level=1, content=[])) == "// Package main is the .\npackage main\n"

    def test_dropped_block_before_heading(self) -> None:
        """A heading after blocks that render nothing still completes the sentence."""
        result = _render(
            HTMLBlock(content='<p align="center"><img src="logo.png"></p>'),
            ThematicBreak(),
            Heading(level=1, content=[Text(content="Thing")]),
            Paragraph(content=[Text(content="Body.")]),
        )
        assert result == "// Package main is the Thing\n//\n// Body.\npackage main\n"

    def test_badge_paragraph_before_heading(self) -> None:
        """A paragraph of suppressed badges does not close the sentence."""
        result = _render(
            Paragraph(content=[_badge()]),
            Heading(level=1, content=[Text(content="Thing")]),
        )
        assert result == "// Package main is the Thing\npackage main\n"

    def test_badge_paragraph_before_heading_when_enabled(self) -> None:
        """A rendered badge is content, so the heading becomes an ordinary line."""
        result = _render(
            Paragraph(content=[_badge()]),
            Heading(level=1, content=[Text(content="Thing")]),
            suppress_badges=False,
        )
        assert result == (
            "// Package main is the .\n"
            "//\n"
            "// Build Status (https://travis-ci.org/sectioneight/md-to-godoc)\n"
            "//\n"
            "// Thing\n"
            "package main\n"
        )

    def test_non_document_root(self) -> None:
        """A bare inline node is rendered straight after the sentence."""
        result = GodocRenderer(GodocRendererOptions(package_name="mypkg")).render_to_string(Text(content="hello"))
        assert result == "// Package mypkg is the hello\npackage mypkg\n"

    def test_output_ends_with_package_clause(self) -> None:
        """The last line is the package clause followed by a newline."""
        result = _render(Heading(level=1, content=[Text(content="x")]), Paragraph(content=[Text(content="y")]))
        assert result.endswith("\npackage main\n")
        assert not result.endswith("//\npackage main\n")

    def test_every_body_line_is_a_comment(self) -> None:
        """All lines before the package clause start with the comment marker."""
        result = _render(
            Heading(level=1, content=[Text(content="tool")]),
            Paragraph(content=[Text(content="one\ntwo")]),
            CodeBlock(content="x := 1\n"),
            List(ordered=False, items=[ListItem(children=[Text(content="a")])]),
        )
        for line in result.splitlines()[:-1]:
            assert line.startswith("//")
            assert line == "//" or line.startswith("// ")


@pytest.mark.unit
class TestBlockLayout:
    """Tests for paragraph, heading, list and code block layout."""

    def test_headings_and_paragraphs_separated_by_one_blank_line(self) -> None:
        """Blocks are separated by exactly one blank comment line."""
        result = _render(
            Heading(level=1, content=[Text(content="Title")]),
            Paragraph(content=[Text(content="Intro")]),
            Heading(level=2, content=[Text(content="Usage")]),
            Paragraph(content=[Text(content="Run it")]),
        )
        assert result == (
            "// Package main is the Title\n"
            "//\n"
            "// Intro\n"
            "//\n"
            "// Usage\n"
            "//\n"
            "// Run it\n"
            "package main\n"
        )

    def test_never_two_blank_lines_in_a_row(self) -> None:
        """Consecutive break requests collapse."""
        result = _render(
            Heading(level=1, content=[Text(content="T")]),
            Paragraph(content=[Text(content="a"), LineBreak(soft=False), LineBreak(soft=False)]),
            Paragraph(content=[Text(content="b")]),
        )
        assert "//\n//\n" not in result

    def test_code_block_with_blank_line(self) -> None:
        """Code lines are indented, inner blank lines kept, one blank line after."""
        result = _render(
            Heading(level=1, content=[Text(content="T")]),
            CodeBlock(content="a\n\nb\n", language="go"),
            Paragraph(content=[Text(content="after")]),
        )
        assert _body_lines(result) == ["//", "//   a", "//", "//   b", "//", "// after"]

    def test_code_block_strips_surrounding_blank_lines(self) -> None:
        """Leading and trailing blank lines and trailing whitespace are dropped."""
        result = _render(
            Heading(level=1, content=[Text(content="T")]),
            CodeBlock(content="\n\nfmt.Println(1)   \n\n\n"),
        )
        assert _body_lines(result) == ["//", "//   fmt.Println(1)"]

    def test_code_block_keeps_inner_blank_runs(self) -> None:
        """Several blank lines inside a code block are all kept."""
        result = _render(
            Heading(level=1, content=[Text(content="T")]),
            CodeBlock(content="a\n\n\nb"),
        )
        assert _body_lines(result) == ["//", "//   a", "//", "//", "//   b"]

    def test_three_item_list(self) -> None:
        """Items after the first are preceded by a blank comment line."""
        items = [ListItem(children=[Paragraph(content=[Text(content=word)])]) for word in ("fast", "small", "simple")]
        result = _render(
            Heading(level=1, content=[Text(content="T")]),
            List(ordered=False, items=items),
            Paragraph(content=[Text(content="end")]),
        )
        assert _body_lines(result) == ["//", "// • fast", "//", "// • small", "//", "// • simple", "//", "// end"]

    def test_ordered_list_uses_bullets(self) -> None:
        """Ordered lists are rendered with the same bullet."""
        result = _render(
            Heading(level=1, content=[Text(content="T")]),
            List(ordered=True, items=[ListItem(children=[Text(content="one")])]),
        )
        assert "// • one" in result.splitlines()
        assert "1." not in result


@pytest.mark.unit
class TestInlineRendering:
    """Tests for text, breaks and inline markup."""

    def _line(self, *content: Node) -> str:
        result = _render(Heading(level=1, content=[Text(content="T")]), Paragraph(content=list(content)))
        return _body_lines(result)[1]

    def test_trailing_space_becomes_separator(self) -> None:
        """A stripped trailing space still separates the next token."""
        line = self._line(Text(content="See "), Code(content="doc.go"))
        assert line == "// See doc.go"

    def test_only_one_trailing_space_stripped(self) -> None:
        """Text keeps all but one trailing space."""
        line = self._line(Text(content="a  "), Text(content="b"))
        assert line == "// a b"

    def test_indented_continuation_line_not_preformatted(self) -> None:
        """Leading whitespace on a wrapped line is dropped so gofmt does not see code."""
        result = _render(
            Heading(level=1, content=[Text(content="T")]),
            Paragraph(content=[Text(content="one\n    two")]),
        )
        assert _body_lines(result) == ["//", "// one", "// two"]

    def test_strong_and_code(self) -> None:
        """Strong keeps its markers and inline code loses its backticks."""
        line = self._line(
            Text(content="Converts a "),
            Strong(content=[Text(content="README.md")]),
            Text(content=" into a "),
            Code(content="doc.go"),
            Text(content=" file."),
        )
        assert line == "// Converts a **README.md** into a doc.go file."

    def test_emphasis_after_word(self) -> None:
        """Emphasis directly after a word gets a separating space."""
        line = self._line(Text(content="very"), Emphasis(content=[Text(content="alpha")]))
        assert line == "// very *alpha*"

    def test_emphasis_at_line_start(self) -> None:
        """Emphasis at the start of a line gets no extra space."""
        line = self._line(Emphasis(content=[Text(content="alpha")]), Text(content=" software"))
        assert line == "// *alpha* software"

    def test_soft_break(self) -> None:
        """A soft break starts a new comment line."""
        result = _render(
            Heading(level=1, content=[Text(content="T")]),
            Paragraph(content=[Text(content="line one"), LineBreak(soft=True), Text(content="line two")]),
        )
        assert _body_lines(result) == ["//", "// line one", "// line two"]

    def test_hard_break(self) -> None:
        """A hard break leaves a blank comment line."""
        result = _render(
            Heading(level=1, content=[Text(content="T")]),
            Paragraph(content=[Text(content="line one"), LineBreak(soft=False), Text(content="line two")]),
        )
        assert _body_lines(result) == ["//", "// line one", "//", "// line two"]

    def test_newlines_inside_text(self) -> None:
        """Embedded newlines split the text into comment lines."""
        result = _render(
            Heading(level=1, content=[Text(content="T")]),
            Paragraph(content=[Text(content="one \ntwo")]),
        )
        assert _body_lines(result) == ["//", "// one", "// two"]


@pytest.mark.unit
class TestLinks:
    """Tests for link rendering and badge suppression."""

    def test_link_with_url(self) -> None:
        """Links render as text followed by the url in parentheses."""
        result = _render(
            Heading(level=1, content=[Text(content="T")]),
            Paragraph(
                content=[
                    Text(content="See "),
                    Link(url="https://godoc.org", content=[Text(content="the docs")]),
                    Text(content=" for details."),
                ]
            ),
        )
        assert "// See the docs (https://godoc.org) for details." in result.splitlines()

    def test_link_title_precedes_text(self) -> None:
        """A link title is written before the link text."""
        result = _render(
            Heading(level=1, content=[Text(content="T")]),
            Paragraph(content=[Link(url="https://a.b", content=[Text(content="text")], title="Title")]),
        )
        assert "// Title text (https://a.b)" in result.splitlines()

    def test_link_without_url(self) -> None:
        """An empty url omits the parenthetical."""
        result = _render(
            Heading(level=1, content=[Text(content="T")]),
            Paragraph(content=[Link(url="", content=[Text(content="nowhere")])]),
        )
        assert "// nowhere" in result.splitlines()
        assert "(" not in result

    def test_badge_suppressed(self) -> None:
        """A link wrapping an image leaves no trace when badges are suppressed."""
        with_badge = _render(
            Heading(level=1, content=[Text(content="T")]),
            Paragraph(content=[_badge()]),
            Paragraph(content=[Text(content="Next")]),
        )
        assert with_badge == "// Package main is the T\n//\n// Next\npackage main\n"

    def test_badge_between_words_suppressed(self) -> None:
        """Suppression restores the spacing state around the badge."""
        result = _render(
            Heading(level=1, content=[Text(content="T")]),
            Paragraph(content=[Text(content="before "), _badge(), Text(content="after")]),
        )
        assert "// before after" in result.splitlines()

    def test_badge_rendered_when_enabled(self) -> None:
        """With badges enabled the title and url are written, never the image."""
        result = _render(
            Heading(level=1, content=[Text(content="T")]),
            Paragraph(content=[_badge()]),
            suppress_badges=False,
        )
        assert "// Build Status (https://travis-ci.org/sectioneight/md-to-godoc)" in result.splitlines()
        assert ".svg" not in result

    def test_image_outside_link_dropped(self) -> None:
        """Images render nothing."""
        result = _render(
            Heading(level=1, content=[Text(content="T")]),
            Paragraph(content=[Image(url="logo.png", alt_text="Logo")]),
        )
        assert result == "// Package main is the T\npackage main\n"


@pytest.mark.unit
class TestUnsupportedNodes:
    """Tests for dropped constructs and fatal node kinds."""

    @pytest.mark.parametrize(
        "node",
        [
            Table(
                header=TableRow(cells=[TableCell(content=[Text(content="h")])], is_header=True),
                rows=[TableRow(cells=[TableCell(content=[Text(content="c")])])],
            ),
            BlockQuote(children=[Paragraph(content=[Text(content="quoted")])]),
            ThematicBreak(),
            HTMLBlock(content="<div>html</div>"),
            FootnoteDefinition(identifier="1", content=[Paragraph(content=[Text(content="note")])]),
        ],
    )
    def test_block_constructs_dropped(self, node: Node) -> None:
        """Known unsupported blocks produce no output."""
        result = _render(Heading(level=1, content=[Text(content="T")]), node)
        assert result == "// Package main is the T\npackage main\n"

    def test_inline_constructs_dropped(self) -> None:
        """Inline HTML and footnote references produce no output."""
        result = _render(
            Heading(level=1, content=[Text(content="T")]),
            Paragraph(
                content=[Text(content="a"), HTMLInline(content="<br>"), FootnoteReference(identifier="1")]
            ),
        )
        assert _body_lines(result) == ["//", "// a"]

    def test_strikethrough_is_fatal(self) -> None:
        """Strikethrough has no rendering rule."""
        doc = Document(children=[Paragraph(content=[Strikethrough(content=[Text(content="gone")])])])
        with pytest.raises(UnsupportedNodeKindError) as exc_info:
            GodocRenderer().render_to_string(doc)
        assert exc_info.value.node_type == "Strikethrough"
        assert "Unknown node type Strikethrough" in str(exc_info.value)

    def test_unknown_node_is_fatal(self) -> None:
        """Node subclasses without a visit method are rejected."""
        with pytest.raises(UnsupportedNodeKindError) as exc_info:
            GodocRenderer().render_to_string(Document(children=[Admonition(text="careful")]))
        assert exc_info.value.node_type == "Admonition"
        assert isinstance(exc_info.value, RenderingError)


@pytest.mark.unit
class TestRendererLifecycle:
    """Tests for construction, reuse and output destinations."""

    def test_default_options(self) -> None:
        """Defaults are package main with badges suppressed."""
        renderer = GodocRenderer()
        assert renderer.options.package_name == "main"
        assert renderer.options.suppress_badges is True

    def test_wrong_options_type(self) -> None:
        """Parser options are rejected."""
        with pytest.raises(InvalidOptionsError):
            GodocRenderer(MarkdownParserOptions())  # type: ignore[arg-type]

    def test_renderer_is_reusable(self, simple_document: Document) -> None:
        """Rendering twice with one instance gives identical output."""
        renderer = GodocRenderer()
        assert renderer.render_to_string(simple_document) == renderer.render_to_string(simple_document)

    def test_independent_instances_agree(self, simple_document: Document) -> None:
        """Two fresh renderers produce identical bytes."""
        assert GodocRenderer().render_to_bytes(simple_document) == GodocRenderer().render_to_bytes(simple_document)

    def test_state_reset_after_failure(self, simple_document: Document) -> None:
        """A failed render does not leak state into the next one."""
        renderer = GodocRenderer()
        with pytest.raises(UnsupportedNodeKindError):
            renderer.render_to_string(Document(children=[Paragraph(content=[Strikethrough()])]))
        assert renderer.render_to_string(simple_document) == GodocRenderer().render_to_string(simple_document)

    def test_render_to_bytes_is_utf8(self) -> None:
        """Bullets are encoded as UTF-8."""
        doc = Document(
            children=[
                Heading(level=1, content=[Text(content="T")]),
                List(ordered=False, items=[ListItem(children=[Text(content="a")])]),
            ]
        )
        assert "• a".encode("utf-8") in GodocRenderer().render_to_bytes(doc)

    def test_render_to_streams(self, simple_document: Document) -> None:
        """render writes to binary and text streams."""
        expected = GodocRenderer().render_to_string(simple_document)

        binary = BytesIO()
        GodocRenderer().render(simple_document, binary)
        assert binary.getvalue() == expected.encode("utf-8")

        text = StringIO()
        GodocRenderer().render(simple_document, text)
        assert text.getvalue() == expected

    def test_render_to_path(self, tmp_path, simple_document: Document) -> None:
        """render writes to a file path."""
        output = tmp_path / "doc.go"
        GodocRenderer().render(simple_document, output)
        assert output.read_text(encoding="utf-8").startswith("// Package main is the")

    def test_nothing_written_on_failure(self, tmp_path) -> None:
        """A failed render leaves the destination untouched."""
        output = tmp_path / "doc.go"
        doc = Document(children=[Paragraph(content=[Strikethrough(content=[Text(content="x")])])])
        with pytest.raises(UnsupportedNodeKindError):
            GodocRenderer().render(doc, output)
        assert not output.exists()

        stream = StringIO()
        with pytest.raises(UnsupportedNodeKindError):
            GodocRenderer().render(doc, stream)
        assert stream.getvalue() == ""
