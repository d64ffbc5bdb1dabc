#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/ast/utils.py
"""Structural helpers for working with AST nodes.

This module holds the depth calculator used for list and quote indentation
and the sibling/ancestor predicates that drive separator placement.

Functions
---------
iter_ancestors : Walk parent links from a node up to the root
list_depth : Zero-based count of list containers above a node
quote_depth : Zero-based count of block quotes above a node
has_successor : Whether a node has a following sibling
is_contained_in_list : Whether any ancestor is a list container
extract_text : Plain text of a subtree

Examples
--------
    >>> from markrun.ast import Document, ListItem, Paragraph, Text, UnorderedList
    >>> inner = UnorderedList(children=[ListItem(children=[Paragraph(children=[Text("b")])])])
    >>> outer = UnorderedList(children=[ListItem(children=[inner])])
    >>> doc = Document(children=[outer])
    >>> list_depth(outer), list_depth(inner)
    (0, 1)

"""

from __future__ import annotations

from typing import Iterator

from markrun.ast.nodes import InlineCode, Node, Text
from markrun.constants import MAX_ANCESTOR_WALK
from markrun.exceptions import RenderingError


def iter_ancestors(node: Node) -> Iterator[Node]:
    """Yield the ancestors of ``node``, nearest first.

    Raises
    ------
    RenderingError
        If the parent chain is longer than ``MAX_ANCESTOR_WALK``, which only
        happens for cyclic parent links.

    """
    current = node.parent
    hops = 0
    while current is not None:
        hops += 1
        if hops > MAX_ANCESTOR_WALK:
            raise RenderingError(
                f"Parent chain of {type(node).__name__} exceeds {MAX_ANCESTOR_WALK} nodes; the tree is cyclic",
                rendering_stage="ancestor_walk",
            )
        yield current
        current = current.parent


def list_depth(node: Node) -> int:
    """Return how many list containers enclose ``node``. Index starts at 0."""
    return sum(1 for ancestor in iter_ancestors(node) if ancestor.is_list_container)


def quote_depth(node: Node) -> int:
    """Return how many block quotes enclose ``node``. Index starts at 0."""
    return sum(1 for ancestor in iter_ancestors(node) if ancestor.is_block_quote)


def has_successor(node: Node) -> bool:
    """Return True if ``node`` has sibling nodes after it."""
    parent = node.parent
    if parent is None:
        return False
    return node.index_in_parent < parent.child_count - 1


def is_contained_in_list(node: Node) -> bool:
    """Return True if any ancestor of ``node`` is a list container."""
    return any(ancestor.is_list_container for ancestor in iter_ancestors(node))


def extract_text(node: Node, joiner: str = "") -> str:
    """Extract the literal text of a subtree.

    Parameters
    ----------
    node : Node
        Root of the subtree
    joiner : str, default = ""
        String placed between the text of sibling nodes

    Returns
    -------
    str
        Concatenated Text and InlineCode content

    """
    if isinstance(node, Text):
        return node.content
    if isinstance(node, InlineCode):
        return node.code
    return joiner.join(extract_text(child, joiner) for child in node.children)
