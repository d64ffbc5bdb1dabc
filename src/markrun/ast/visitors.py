#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

Visitors separate algorithms (such as rendering to attributed runs) from the
node structure. Every node kind the renderer styles has a dedicated
``visit_*`` method; every other kind is routed through ``default_visit``,
so a visitor never fails on a node it does not know about.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from markrun.ast.nodes import (
    BlockQuote,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    InlineCode,
    Link,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    Strikethrough,
    Strong,
    Text,
    UnorderedList,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a ``visit_*`` method for each styled node kind and
    ``default_visit`` for everything else.

    Examples
    --------
    Visitor that collects the literal text of a tree:

        >>> class TextCollector(NodeVisitor):
        ...     def default_visit(self, node):
        ...         return "".join(child.accept(self) for child in node.children)
        ...
        ...     def visit_text(self, node):
        ...         return node.content
        ...
        ...     visit_document = visit_paragraph = visit_heading = default_visit
        ...     # ... and so on for the remaining container kinds

    """

    @abstractmethod
    def default_visit(self, node: Node) -> Any:
        """Visit a node that has no dedicated visit method.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_inline_code(self, node: InlineCode) -> Any:
        """Visit an InlineCode node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""
        pass

    @abstractmethod
    def visit_unordered_list(self, node: UnorderedList) -> Any:
        """Visit an UnorderedList node."""
        pass

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList) -> Any:
        """Visit an OrderedList node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass
