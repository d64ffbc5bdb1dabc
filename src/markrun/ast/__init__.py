#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/ast/__init__.py
"""Abstract Syntax Tree (AST) module for Markdown documents.

The module consists of several components:

- nodes: AST node classes with parent links and sibling indices
- visitors: Visitor pattern base class used by renderers
- utils: Depth calculation and structural predicates

Examples
--------
Basic usage:

    >>> from markrun.ast import Document, Heading, Paragraph, Text
    >>> from markrun.renderers.attributed import AttributedRenderer
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, children=[Text("Title")]),
    ...     Paragraph(children=[Text("Hello world")]),
    ... ])
    >>> runs = AttributedRenderer().render(doc)

"""

from markrun.ast.nodes import (
    BlockQuote,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    Image,
    InlineCode,
    InlineHTML,
    LineBreak,
    Link,
    ListItem,
    Node,
    NodeKind,
    OrderedList,
    Paragraph,
    SoftBreak,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
    UnorderedList,
)
from markrun.ast.utils import (
    extract_text,
    has_successor,
    is_contained_in_list,
    iter_ancestors,
    list_depth,
    quote_depth,
)
from markrun.ast.visitors import NodeVisitor

__all__ = [
    # Base
    "Node",
    "NodeKind",
    # Block nodes
    "Document",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "BlockQuote",
    "UnorderedList",
    "OrderedList",
    "ListItem",
    "ThematicBreak",
    "HTMLBlock",
    # Inline nodes
    "Text",
    "Emphasis",
    "Strong",
    "Strikethrough",
    "InlineCode",
    "Link",
    "Image",
    "LineBreak",
    "SoftBreak",
    "InlineHTML",
    # Helpers
    "iter_ancestors",
    "list_depth",
    "quote_depth",
    "has_successor",
    "is_contained_in_list",
    "extract_text",
    # Visitors
    "NodeVisitor",
]
