#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2godoc/ast/__init__.py
"""Abstract Syntax Tree (AST) module for Markdown documents.

The Markdown parser builds these nodes and the Go doc renderer walks them,
which keeps Markdown lexing entirely separate from doc comment formatting.

- nodes: AST node classes representing document structure
- visitors: Visitor base class for AST traversal

Examples
--------
    >>> from md2godoc.ast import Document, Heading, Text
    >>> from md2godoc.renderers.godoc import GodocRenderer
    >>> doc = Document(children=[Heading(level=1, content=[Text(content="Markdown to Godoc converter")])])
    >>> GodocRenderer().render_to_string(doc)
    '// Package main is the Markdown to Godoc converter\\npackage main\\n'

"""

from __future__ import annotations

from md2godoc.ast.nodes import (
    Alignment,
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
    get_node_children,
)
from md2godoc.ast.visitors import NodeVisitor

__all__ = [
    "Alignment",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "FootnoteDefinition",
    "FootnoteReference",
    "Heading",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "SourceLocation",
    "Strikethrough",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
    "get_node_children",
]
