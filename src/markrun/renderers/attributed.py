#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/renderers/attributed.py
"""Attributed-run rendering from AST.

The renderer walks the tree depth-first and returns an
:class:`~markrun.attributed.AttributedString`. Every visit method returns a
fresh fragment for its subtree; parents restyle and concatenate those
fragments, so no state is shared between visits or between calls.

Layout rules
------------
- Paragraphs are followed by a blank line, or by a single newline when
  they sit inside a list. Headings, unordered lists and block quotes are
  followed by a blank line; ordered lists follow the paragraph rule. List
  items and code blocks are followed by a single newline. A block that is
  the last child of its parent gets no separator.
- List markers carry a paragraph style with a right-aligned tab stop at the
  end of the marker column and a left-aligned stop ``marker_spacing`` points
  further, which is also the head indent.
- Block quote children get a single left tab stop and are forced to the
  muted color, overriding any color set inside them.

"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional
from urllib.parse import urlsplit

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
from markrun.ast.utils import has_successor, is_contained_in_list, list_depth, quote_depth
from markrun.ast.visitors import NodeVisitor
from markrun.attributed import (
    AttributedString,
    AttributeKey,
    ParagraphStyle,
    StrikethroughStyle,
    TabStop,
    TextAlignment,
)
from markrun.constants import DANGEROUS_SCHEMES, INVALID_URL_CHARACTERS
from markrun.options.attributed import AttributedRendererOptions
from markrun.renderers.base import BaseRenderer
from markrun.styling.backend import StyleBackend
from markrun.styling.fonts import FontDescriptor, FontTrait, FontWeight
from markrun.styling.reportlab_backend import ReportLabStyleBackend
from markrun.styling.traits import apply_traits
from markrun.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


class AttributedRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes into a sequence of attributed text runs.

    Parameters
    ----------
    options : AttributedRendererOptions or None, default = None
        Sizing, spacing and color configuration
    backend : StyleBackend or None, default = None
        Font provider and text measurer. Defaults to a
        :class:`~markrun.styling.ReportLabStyleBackend` using the font
        families named in ``options``.

    Examples
    --------
        >>> from markrun.ast import Document, Paragraph, Strong, Text
        >>> doc = Document(children=[Paragraph(children=[Text("Hello "), Strong(children=[Text("world")])])])
        >>> result = AttributedRenderer().render(doc)
        >>> [run.text for run in result]
        ['Hello ', 'world']

    """

    def __init__(self, options: AttributedRendererOptions | None = None, backend: StyleBackend | None = None) -> None:
        """Initialize the renderer with options and a styling backend."""
        BaseRenderer._validate_options_type(options, AttributedRendererOptions, "attributed")
        options = options or AttributedRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: AttributedRendererOptions = options
        self.backend: StyleBackend = backend or ReportLabStyleBackend(
            font_family=options.font_family, monospace_family=options.monospace_family
        )

    def render(self, doc: Node) -> AttributedString:
        """Render the tree rooted at ``doc`` to attributed runs.

        Parameters
        ----------
        doc : Node
            Root of the tree, usually a Document

        Returns
        -------
        AttributedString
            Runs in document order

        Raises
        ------
        RenderingError
            If the tree is cyclic or nested deeper than ``max_nesting_depth``

        """
        self._check_tree(doc)
        with debug_timer(logger, "Rendering (attributed)"):
            return doc.accept(self)

    # ------------------------------------------------------------------
    # Shared fragments
    # ------------------------------------------------------------------

    def _base_font(self) -> FontDescriptor:
        return self.backend.system_font(self.options.base_font_size, FontWeight.REGULAR)

    def _code_font(self) -> FontDescriptor:
        return self.backend.monospaced_font(
            self.options.base_font_size - self.options.code_size_delta, FontWeight.REGULAR
        )

    def _single_newline(self) -> AttributedString:
        return AttributedString.from_text("\n", {AttributeKey.FONT: self._base_font()})

    def _double_newline(self) -> AttributedString:
        return AttributedString.from_text("\n\n", {AttributeKey.FONT: self._base_font()})

    def _render_children(self, node: Node) -> AttributedString:
        result = AttributedString()
        for child in node.children:
            result.append(child.accept(self))
        return result

    def _left_margin(self, depth: int) -> float:
        return self.options.base_left_margin + self.options.nesting_indent * depth

    def _list_paragraph_style(self, depth: int, column_width: float) -> ParagraphStyle:
        """Build the marker paragraph style for a list at ``depth``."""
        first_tab = self._left_margin(depth) + column_width
        second_tab = first_tab + self.options.marker_spacing
        return ParagraphStyle(
            tab_stops=(
                TabStop(TextAlignment.RIGHT, first_tab),
                TabStop(TextAlignment.LEFT, second_tab),
            ),
            head_indent=second_tab,
        )

    def _link_target(self, destination: Optional[str]) -> Optional[str]:
        """Return ``destination`` if it is usable as a link target, else None."""
        if destination is None:
            return None
        if not destination or any(_is_invalid_url_character(ch) for ch in destination):
            logger.debug("Link destination %r is not a valid URL; rendering without a link", destination)
            return None
        try:
            urlsplit(destination).port
        except ValueError as exc:
            logger.debug("Link destination %r could not be parsed (%s); rendering without a link", destination, exc)
            return None
        if self.options.drop_unsafe_links:
            lowered = destination.lower()
            if any(lowered.startswith(scheme) for scheme in DANGEROUS_SCHEMES):
                logger.debug("Link destination %r uses a dangerous scheme; rendering without a link", destination)
                return None
        return destination

    # ------------------------------------------------------------------
    # Containers without styling
    # ------------------------------------------------------------------

    def default_visit(self, node: Node) -> AttributedString:
        """Render the children of a node kind without dedicated styling."""
        logger.debug("No dedicated rendering for %s; rendering its children", type(node).__name__)
        return self._render_children(node)

    def visit_document(self, node: Document) -> AttributedString:
        """Concatenate the document's blocks; each block adds its own separator."""
        return self._render_children(node)

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> AttributedString:
        """Render literal text in the regular base font."""
        return AttributedString.from_text(node.content, {AttributeKey.FONT: self._base_font()})

    def visit_emphasis(self, node: Emphasis) -> AttributedString:
        """Render children and add the italic trait to every font."""
        result = self._render_children(node)
        apply_traits(result, FontTrait.ITALIC, self.backend)
        return result

    def visit_strong(self, node: Strong) -> AttributedString:
        """Render children and add the bold trait to every font."""
        result = self._render_children(node)
        apply_traits(result, FontTrait.BOLD, self.backend)
        return result

    def visit_strikethrough(self, node: Strikethrough) -> AttributedString:
        """Render children with a single-line strikethrough over the whole range."""
        result = self._render_children(node)
        result.add_attribute(AttributeKey.STRIKETHROUGH, StrikethroughStyle.SINGLE)
        return result

    def visit_link(self, node: Link) -> AttributedString:
        """Render children in the link color, linked when the destination parses."""
        result = self._render_children(node)
        result.add_attribute(AttributeKey.FOREGROUND_COLOR, self.options.link_color)
        target = self._link_target(node.destination)
        if target is not None:
            result.add_attribute(AttributeKey.LINK, target)
        return result

    def visit_inline_code(self, node: InlineCode) -> AttributedString:
        """Render a code span in the muted monospaced style."""
        return AttributedString.from_text(
            node.code,
            {AttributeKey.FONT: self._code_font(), AttributeKey.FOREGROUND_COLOR: self.options.muted_color},
        )

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_code_block(self, node: CodeBlock) -> AttributedString:
        """Render a code block in the muted monospaced style."""
        result = AttributedString.from_text(
            node.code,
            {AttributeKey.FONT: self._code_font(), AttributeKey.FOREGROUND_COLOR: self.options.muted_color},
        )
        if has_successor(node):
            result.append(self._single_newline())
        return result

    def visit_paragraph(self, node: Paragraph) -> AttributedString:
        """Render inline content followed by the paragraph separator."""
        result = self._render_children(node)
        if has_successor(node):
            result.append(self._single_newline() if is_contained_in_list(node) else self._double_newline())
        return result

    def visit_heading(self, node: Heading) -> AttributedString:
        """Render inline content in bold at the heading's point size."""
        result = self._render_children(node)
        size = self.options.heading_base_size - self.options.heading_size_step * node.level
        apply_traits(result, FontTrait.BOLD, self.backend, point_size=size)
        if has_successor(node):
            result.append(self._double_newline())
        return result

    def visit_unordered_list(self, node: UnorderedList) -> AttributedString:
        """Render each item behind a bullet marker in a right-aligned column."""
        result = AttributedString()
        font = self._base_font()
        depth = list_depth(node)
        bullet_width = math.ceil(self.backend.measure(self.options.bullet, font))
        marker_attributes: dict[AttributeKey, Any] = {
            AttributeKey.PARAGRAPH_STYLE: self._list_paragraph_style(depth, bullet_width),
            AttributeKey.FONT: font,
            AttributeKey.NESTING_DEPTH: depth,
        }

        for item in node.list_items:
            item_string = item.accept(self)
            item_string.prepend(AttributedString.from_text(f"\t{self.options.bullet}\t", marker_attributes))
            result.append(item_string)

        if has_successor(node):
            result.append(self._double_newline())
        return result

    def visit_ordered_list(self, node: OrderedList) -> AttributedString:
        """Render each item behind its number, aligned on the widest number."""
        result = AttributedString()
        numeral_font = self.backend.monospaced_digit_font(self.options.base_font_size, FontWeight.REGULAR)
        depth = list_depth(node)

        # Every marker uses the width of the highest number so the columns line up
        highest_number = node.child_count
        numeral_column_width = math.ceil(self.backend.measure(f"{highest_number}.", numeral_font))
        marker_attributes: dict[AttributeKey, Any] = {
            AttributeKey.PARAGRAPH_STYLE: self._list_paragraph_style(depth, numeral_column_width),
            AttributeKey.FONT: numeral_font,
            AttributeKey.NESTING_DEPTH: depth,
        }

        for index, item in enumerate(node.list_items):
            item_string = item.accept(self)
            item_string.prepend(AttributedString.from_text(f"\t{index + 1}.\t", marker_attributes))
            result.append(item_string)

        if has_successor(node):
            result.append(self._single_newline() if is_contained_in_list(node) else self._double_newline())
        return result

    def visit_list_item(self, node: ListItem) -> AttributedString:
        """Render the item's blocks followed by the item separator."""
        result = self._render_children(node)
        if has_successor(node):
            result.append(self._single_newline())
        return result

    def visit_block_quote(self, node: BlockQuote) -> AttributedString:
        """Render each child behind a tab marker in the muted color."""
        result = AttributedString()
        depth = quote_depth(node)
        left_margin = self._left_margin(depth)
        marker_attributes: dict[AttributeKey, Any] = {
            AttributeKey.PARAGRAPH_STYLE: ParagraphStyle(
                tab_stops=(TabStop(TextAlignment.LEFT, left_margin),),
                head_indent=left_margin,
            ),
            AttributeKey.FONT: self._base_font(),
            AttributeKey.NESTING_DEPTH: depth,
        }

        for child in node.children:
            child_string = child.accept(self)
            child_string.prepend(AttributedString.from_text("\t", marker_attributes))
            child_string.add_attribute(AttributeKey.FOREGROUND_COLOR, self.options.muted_color)
            result.append(child_string)

        if has_successor(node):
            result.append(self._double_newline())
        return result


def _is_invalid_url_character(ch: str) -> bool:
    return ch in INVALID_URL_CHARACTERS or ch.isspace() or not ch.isprintable()
