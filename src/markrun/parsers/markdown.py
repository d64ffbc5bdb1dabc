#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/parsers/markdown.py
"""Markdown to AST parser.

This module builds the markrun AST from Markdown text using the mistune
parser. mistune is run without a renderer so it returns its token tree,
which is then mapped node by node. Token types with no markrun counterpart
(tables, footnotes, math) are not enabled and anything unexpected is
skipped with a debug message.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Optional, Union

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
    Link,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
    UnorderedList,
)
from markrun.constants import DEPS_MARKDOWN, TaskStatus
from markrun.options.markdown import MarkdownParserOptions
from markrun.parsers.base import BaseParser
from markrun.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)

# Block tokens that carry no content
_IGNORED_BLOCK_TOKENS = frozenset({"blank_line"})


class MarkdownToAstConverter(BaseParser):
    """Convert Markdown to the markrun AST.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Title\\n\\nSome *text*.")
        >>> [type(child).__name__ for child in doc.children]
        ['Heading', 'Paragraph']

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse Markdown input into an AST Document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            Markdown text, a path to a Markdown file, raw bytes or a stream

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If the input cannot be read or decoded
        DependencyError
            If mistune is not installed

        """
        markdown_content = self._load_text_content(input_data)

        import mistune

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_task_lists:
            plugins.append("task_lists")

        markdown = mistune.create_markdown(plugins=plugins, renderer=None)

        with debug_timer(logger, "Parsing (markdown)"):
            tokens, _state = markdown.parse(markdown_content)
            children = self._process_tokens(tokens) if isinstance(tokens, list) else []

        return Document(children=children)

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Optional[Node]:
        """Process a single mistune block token."""
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items - treat like paragraph
            return Paragraph(children=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(html=token.get("raw", ""))
        elif token_type in _IGNORED_BLOCK_TOKENS:
            return None

        logger.debug("Skipping unsupported markdown block token: %s", token_type)
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        """Process heading token, clamping the level to 1-6."""
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1
        return Heading(level=level, children=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token, taking the language from the info string."""
        attrs = token.get("attrs", {})
        info_string = attrs.get("info") if isinstance(attrs, dict) else None
        language = None
        if info_string:
            parts = info_string.strip().split(maxsplit=1)
            if parts:
                language = parts[0]
        return CodeBlock(code=token.get("raw", ""), language=language)

    def _process_list(self, token: dict[str, Any]) -> Union[OrderedList, UnorderedList]:
        """Process list token into an ordered or unordered list."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        children = token.get("children", [])
        if not isinstance(children, list):
            children = []
        items: list[Node] = [self._process_list_item(child) for child in children if isinstance(child, dict)]

        if attrs.get("ordered", False):
            return OrderedList(children=items, start=attrs.get("start", 1))
        return UnorderedList(children=items)

    def _process_list_item(self, token: dict[str, Any]) -> ListItem:
        """Process list item token, keeping task list state if present."""
        checkbox: TaskStatus | None = None
        attrs = token.get("attrs", {})
        if isinstance(attrs, dict) and "checked" in attrs:
            checkbox = "checked" if attrs["checked"] else "unchecked"
        return ListItem(children=self._process_tokens(token.get("children", [])), checkbox=checkbox)

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens into AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        return Text(content=token.get("raw", ""))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        return Strong(children=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(children=self._process_inline_tokens(token.get("children", [])))

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        return Strikethrough(children=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> InlineCode:
        return InlineCode(code=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        """Handle link token."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return Link(
            children=self._process_inline_tokens(token.get("children", [])),
            destination=attrs.get("url"),
            title=attrs.get("title"),
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token. Alt text is in children, not attrs."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return Image(
            children=self._process_inline_tokens(token.get("children", [])),
            source=attrs.get("url"),
            title=attrs.get("title"),
        )

    def _handle_linebreak_token(self, token: dict[str, Any]) -> Text:
        """Handle hard line break as a literal newline."""
        return Text(content="\n")

    def _handle_softbreak_token(self, token: dict[str, Any]) -> Text:
        """Handle soft line break as a single space so adjacent words stay apart."""
        return Text(content=" ")

    def _handle_inline_html_token(self, token: dict[str, Any]) -> InlineHTML:
        return InlineHTML(html=token.get("raw", ""))

    def _process_inline_token(self, token: dict[str, Any]) -> Optional[Node]:
        """Dispatch a single inline token to its handler."""
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "strikethrough": self._handle_strikethrough_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "inline_html": self._handle_inline_html_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)
        logger.debug("Skipping unsupported markdown inline token: %s", token_type)
        return None
