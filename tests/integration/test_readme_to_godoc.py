#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_readme_to_godoc.py
"""Integration tests: Markdown text through the parser and renderer to doc.go."""

import sys
from pathlib import Path

import pytest

from md2godoc import markdown_to_godoc, render_godoc
from md2godoc.ast import Document, Heading, Text
from md2godoc.exceptions import PackageNameError, UnsupportedNodeKindError
from md2godoc.options import MarkdownParserOptions
from md2godoc.parsers.markdown import markdown_to_ast

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

PROJECT_ROOT = Path(__file__).resolve().parents[2]

EXPECTED_README_DOC = (
    "// Package demo is the Markdown to Godoc converter\n"
    "//\n"
    "// Converts a **README.md** into a doc.go file.\n"
    "//\n"
    "// Usage\n"
    "//\n"
    "//   //go:generate md-to-godoc\n"
    "//\n"
    "// • fast\n"
    "//\n"
    "// • small\n"
    "//\n"
    "// See the docs (https://godoc.org) for details.\n"
    "package demo\n"
)


@pytest.mark.integration
class TestReadmeToGodoc:
    """End-to-end conversions of README-shaped Markdown."""

    def test_full_readme(self, readme_text: str) -> None:
        """A typical README renders to the expected doc comment."""
        assert markdown_to_godoc(readme_text, "demo") == EXPECTED_README_DOC

    def test_readme_from_path(self, project_dir) -> None:
        """Paths are read the same as text."""
        assert markdown_to_godoc(project_dir / "README.md", "demo") == EXPECTED_README_DOC

    def test_badge_kept_when_enabled(self, readme_text: str) -> None:
        """Badges render as their url when suppression is off."""
        lines = markdown_to_godoc(readme_text, "demo", suppress_badges=False).splitlines()
        assert "// (https://travis-ci.org/sectioneight/md-to-godoc)" in lines
        assert not any(".svg" in line for line in lines)

    def test_frontmatter_not_rendered(self) -> None:
        """Front matter is stripped before rendering."""
        result = markdown_to_godoc("---\ntitle: Demo\n---\n# tool\n", "tool")
        assert result == "// Package tool is the tool\npackage tool\n"

    def test_centered_logo_before_title(self) -> None:
        """An HTML logo block above the title does not take over the opening sentence."""
        source = '<p align="center"><img src="logo.png"></p>\n\n# Thing\n\nBody.\n'
        assert markdown_to_godoc(source, "main") == "// Package main is the Thing\n//\n// Body.\npackage main\n"

    def test_tables_and_footnotes_dropped(self) -> None:
        """Tables and footnotes leave no output."""
        source = "# tool\n\n| a | b |\n|---|---|\n| 1 | 2 |\n\nNote[^1].\n\n[^1]: Footnote text.\n"
        result = markdown_to_godoc(source, "tool")
        assert "| a" not in result
        assert "Footnote text" not in result
        assert "// Note." in result.splitlines()

    def test_blank_lines_never_repeat(self, readme_text: str) -> None:
        """No two blank comment lines are adjacent outside code blocks."""
        assert "//\n//\n" not in markdown_to_godoc(readme_text + "\n\n\n---\n\n> quote\n\nend\n", "demo")

    def test_strikethrough_rejected(self) -> None:
        """Enabling strikethrough parsing yields nodes the renderer rejects."""
        with pytest.raises(UnsupportedNodeKindError):
            markdown_to_godoc("# x\n\n~~gone~~\n", "x", parser_options=MarkdownParserOptions(parse_strikethrough=True))

    def test_invalid_package_name(self, readme_text: str) -> None:
        """The package name is validated before any work is done."""
        with pytest.raises(PackageNameError):
            markdown_to_godoc(readme_text, "type")


@pytest.mark.integration
class TestRenderGodoc:
    """Tests for render_godoc."""

    def test_returns_bytes(self) -> None:
        """render_godoc returns UTF-8 bytes."""
        doc = Document(children=[Heading(level=1, content=[Text(content="tool")])])
        assert render_godoc(doc, "tool") == b"// Package tool is the tool\npackage tool\n"

    def test_matches_string_api(self, readme_text: str) -> None:
        """Both entry points agree."""
        doc = markdown_to_ast(readme_text)
        assert render_godoc(doc, "demo") == markdown_to_godoc(readme_text, "demo").encode("utf-8")

    def test_rejects_keyword(self) -> None:
        """Go keywords are not package names."""
        with pytest.raises(PackageNameError):
            render_godoc(Document(), "func")


@pytest.mark.integration
class TestProjectReadme:
    """The project's own README is the package long description and renders cleanly."""

    def test_pyproject_readme_is_project_readme(self) -> None:
        """The packaged long description is README.md."""
        with open(PROJECT_ROOT / "pyproject.toml", "rb") as f:
            project = tomllib.load(f)["project"]
        assert project["readme"] == "README.md"
        assert (PROJECT_ROOT / project["readme"]).is_file()

    def test_project_readme_renders(self) -> None:
        """The README converts to a doc comment opening with its title."""
        lines = markdown_to_godoc(PROJECT_ROOT / "README.md", "md2godoc").splitlines()
        assert lines[0] == "// Package md2godoc is the md2godoc"
        assert "// Convert a Markdown README into Go package documentation (doc.go)." in lines
        assert lines[-1] == "package md2godoc"
