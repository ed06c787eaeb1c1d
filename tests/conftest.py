"""Pytest configuration and shared fixtures for the md2godoc test suite."""

import logging
from pathlib import Path

import pytest

from md2godoc.ast import Document, Heading, Paragraph, Text


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def simple_document() -> Document:
    """Provide a heading followed by one paragraph."""
    return Document(
        children=[
            Heading(level=1, content=[Text(content="Markdown to Godoc converter.")]),
            Paragraph(content=[Text(content="Way, way alpha.")]),
        ]
    )


@pytest.fixture
def readme_text() -> str:
    """Provide a README in the shape most Go projects use."""
    return (
        "# Markdown to Godoc converter\n"
        "\n"
        "[![Build Status](https://travis-ci.org/sectioneight/md-to-godoc.svg)](https://travis-ci.org/sectioneight/md-to-godoc)\n"
        "\n"
        "Converts a **README.md** into a `doc.go` file.\n"
        "\n"
        "## Usage\n"
        "\n"
        "```go\n"
        "//go:generate md-to-godoc\n"
        "```\n"
        "\n"
        "- fast\n"
        "- small\n"
        "\n"
        "See [the docs](https://godoc.org) for details.\n"
    )


@pytest.fixture
def project_dir(tmp_path: Path, readme_text: str) -> Path:
    """Provide a directory holding README.md and LICENSE.txt."""
    (tmp_path / "README.md").write_text(readme_text, encoding="utf-8")
    (tmp_path / "LICENSE.txt").write_text("Copyright 2016 Aiden Scandella\n\nMIT License\n", encoding="utf-8")
    return tmp_path


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo root logger changes made by the CLI's logging setup."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
