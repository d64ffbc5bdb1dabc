#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/ast/nodes.py
"""AST node classes for Markdown document representation.

This module defines the node hierarchy consumed by the attributed renderer.
Each node represents a structural or inline element of a parsed Markdown
document. Trees are built once (usually by
:class:`markrun.parsers.markdown.MarkdownToAstConverter`) and are read-only
input from then on.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote
    - UnorderedList, OrderedList, ListItem
    - ThematicBreak, HTMLBlock

Inline nodes:
    - Text, Emphasis, Strong, Strikethrough, InlineCode, Link
    - Image, LineBreak, SoftBreak, InlineHTML

Structure
---------
Containers adopt their children when constructed: every child receives a
weak back reference to its parent and its index among its siblings. A node
can belong to a single parent only. The renderer relies on these links for
successor checks and nesting depth, so children should be supplied at
construction time rather than appended afterwards.

"""

from __future__ import annotations

import weakref
from abc import ABC
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Iterator, Optional, Sequence

from markrun.constants import TaskStatus

if TYPE_CHECKING:
    from markrun.ast.visitors import NodeVisitor


class NodeKind(str, Enum):
    """Closed set of node kinds understood by the library."""

    DOCUMENT = "document"
    TEXT = "text"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    LINK = "link"
    INLINE_CODE = "inline_code"
    CODE_BLOCK = "code_block"
    STRIKETHROUGH = "strikethrough"
    UNORDERED_LIST = "unordered_list"
    ORDERED_LIST = "ordered_list"
    LIST_ITEM = "list_item"
    BLOCK_QUOTE = "block_quote"
    IMAGE = "image"
    LINE_BREAK = "line_break"
    SOFT_BREAK = "soft_break"
    THEMATIC_BREAK = "thematic_break"
    HTML_BLOCK = "html_block"
    INLINE_HTML = "inline_html"


class Node(ABC):
    """Base class for all AST nodes.

    Concrete nodes are dataclasses. Leaf nodes inherit the empty ``children``
    tuple declared here; containers declare a ``children`` list field.

    Attributes
    ----------
    kind : NodeKind
        The node's kind tag
    children : sequence of Node
        Ordered child nodes

    """

    kind: ClassVar[NodeKind]
    children: Sequence[Node] = ()

    _parent_ref: Optional[weakref.ReferenceType[Node]] = None
    _index_in_parent: int = 0

    def __post_init__(self) -> None:
        """Attach children to this node."""
        for index, child in enumerate(self.children):
            if not isinstance(child, Node):
                raise TypeError(f"{type(self).__name__} children must be Node instances, got {type(child).__name__}")
            child._attach(self, index)

    def _attach(self, parent: Node, index: int) -> None:
        current = self.parent
        if current is not None and current is not parent:
            raise ValueError(f"{type(self).__name__} node is already attached to a {type(current).__name__}")
        self._parent_ref = weakref.ref(parent)
        self._index_in_parent = index

    @property
    def parent(self) -> Optional[Node]:
        """Return the parent node, or None for a root or detached node."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def index_in_parent(self) -> int:
        """Return this node's position among its siblings."""
        return self._index_in_parent

    @property
    def child_count(self) -> int:
        """Return the number of direct children."""
        return len(self.children)

    @property
    def is_list_container(self) -> bool:
        """Whether this node is an ordered or unordered list."""
        return False

    @property
    def is_block_quote(self) -> bool:
        """Whether this node is a block quote."""
        return False

    def walk(self) -> Iterator[Node]:
        """Yield this node and its descendants depth-first in document order."""
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def accept(self, visitor: NodeVisitor) -> Any:
        """Accept a visitor for processing this node.

        Kinds without a dedicated visit method go to ``default_visit``.

        Parameters
        ----------
        visitor : NodeVisitor
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        return visitor.default_visit(self)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing block-level children."""

    kind: ClassVar[NodeKind] = NodeKind.DOCUMENT

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: NodeVisitor) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    children : list of Node, default = empty list
        Inline nodes representing heading text

    """

    kind: ClassVar[NodeKind] = NodeKind.HEADING

    level: int
    children: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")
        super().__post_init__()

    def accept(self, visitor: NodeVisitor) -> Any:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content."""

    kind: ClassVar[NodeKind] = NodeKind.PARAGRAPH

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: NodeVisitor) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self)


@dataclass
class CodeBlock(Node):
    """Fenced or indented code block.

    Parameters
    ----------
    code : str
        Literal code content, including its trailing newline if any
    language : str or None, default = None
        Language from the fence info string

    """

    kind: ClassVar[NodeKind] = NodeKind.CODE_BLOCK

    code: str
    language: Optional[str] = None

    def accept(self, visitor: NodeVisitor) -> Any:
        """Dispatch to ``visitor.visit_code_block``."""
        return visitor.visit_code_block(self)


@dataclass
class BlockQuote(Node):
    """Block quote containing block-level children."""

    kind: ClassVar[NodeKind] = NodeKind.BLOCK_QUOTE

    children: list[Node] = field(default_factory=list)

    @property
    def is_block_quote(self) -> bool:
        """Block quotes always report True."""
        return True

    def accept(self, visitor: NodeVisitor) -> Any:
        """Dispatch to ``visitor.visit_block_quote``."""
        return visitor.visit_block_quote(self)


@dataclass
class UnorderedList(Node):
    """Bulleted list whose children are ListItem nodes."""

    kind: ClassVar[NodeKind] = NodeKind.UNORDERED_LIST

    children: list[Node] = field(default_factory=list)

    @property
    def is_list_container(self) -> bool:
        """Lists always report True."""
        return True

    @property
    def list_items(self) -> list[ListItem]:
        """Return the ListItem children in document order."""
        return [child for child in self.children if isinstance(child, ListItem)]

    def accept(self, visitor: NodeVisitor) -> Any:
        """Dispatch to ``visitor.visit_unordered_list``."""
        return visitor.visit_unordered_list(self)


@dataclass
class OrderedList(Node):
    """Numbered list whose children are ListItem nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        The list items
    start : int, default = 1
        Start number written in the source. Kept for consumers; markers are
        always numbered from 1.

    """

    kind: ClassVar[NodeKind] = NodeKind.ORDERED_LIST

    children: list[Node] = field(default_factory=list)
    start: int = 1

    @property
    def is_list_container(self) -> bool:
        """Lists always report True."""
        return True

    @property
    def list_items(self) -> list[ListItem]:
        """Return the ListItem children in document order."""
        return [child for child in self.children if isinstance(child, ListItem)]

    def accept(self, visitor: NodeVisitor) -> Any:
        """Dispatch to ``visitor.visit_ordered_list``."""
        return visitor.visit_ordered_list(self)


@dataclass
class ListItem(Node):
    """Single item of an ordered or unordered list.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level content of the item
    checkbox : {"checked", "unchecked"} or None, default = None
        Task list state, if the item is a task

    """

    kind: ClassVar[NodeKind] = NodeKind.LIST_ITEM

    children: list[Node] = field(default_factory=list)
    checkbox: Optional[TaskStatus] = None

    def accept(self, visitor: NodeVisitor) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self)


@dataclass
class ThematicBreak(Node):
    """Horizontal rule."""

    kind: ClassVar[NodeKind] = NodeKind.THEMATIC_BREAK


@dataclass
class HTMLBlock(Node):
    """Raw HTML block, passed through unrendered."""

    kind: ClassVar[NodeKind] = NodeKind.HTML_BLOCK

    html: str = ""


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node."""

    kind: ClassVar[NodeKind] = NodeKind.TEXT

    content: str

    def accept(self, visitor: NodeVisitor) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node."""

    kind: ClassVar[NodeKind] = NodeKind.EMPHASIS

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: NodeVisitor) -> Any:
        """Dispatch to ``visitor.visit_emphasis``."""
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strong (bold) node."""

    kind: ClassVar[NodeKind] = NodeKind.STRONG

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: NodeVisitor) -> Any:
        """Dispatch to ``visitor.visit_strong``."""
        return visitor.visit_strong(self)


@dataclass
class Strikethrough(Node):
    """Strikethrough (GFM ``~~text~~``) node."""

    kind: ClassVar[NodeKind] = NodeKind.STRIKETHROUGH

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: NodeVisitor) -> Any:
        """Dispatch to ``visitor.visit_strikethrough``."""
        return visitor.visit_strikethrough(self)


@dataclass
class InlineCode(Node):
    """Inline code span."""

    kind: ClassVar[NodeKind] = NodeKind.INLINE_CODE

    code: str

    def accept(self, visitor: NodeVisitor) -> Any:
        """Dispatch to ``visitor.visit_inline_code``."""
        return visitor.visit_inline_code(self)


@dataclass
class Link(Node):
    """Hyperlink node.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline nodes forming the link text
    destination : str or None, default = None
        Link target as written in the source
    title : str or None, default = None
        Optional link title

    """

    kind: ClassVar[NodeKind] = NodeKind.LINK

    children: list[Node] = field(default_factory=list)
    destination: Optional[str] = None
    title: Optional[str] = None

    def accept(self, visitor: NodeVisitor) -> Any:
        """Dispatch to ``visitor.visit_link``."""
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image node. Its children hold the alt text."""

    kind: ClassVar[NodeKind] = NodeKind.IMAGE

    children: list[Node] = field(default_factory=list)
    source: Optional[str] = None
    title: Optional[str] = None


@dataclass
class LineBreak(Node):
    """Hard line break."""

    kind: ClassVar[NodeKind] = NodeKind.LINE_BREAK


@dataclass
class SoftBreak(Node):
    """Soft line break (a plain newline inside a paragraph)."""

    kind: ClassVar[NodeKind] = NodeKind.SOFT_BREAK


@dataclass
class InlineHTML(Node):
    """Raw inline HTML."""

    kind: ClassVar[NodeKind] = NodeKind.INLINE_HTML

    html: str = ""
