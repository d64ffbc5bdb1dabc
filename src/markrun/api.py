#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/api.py
"""Convenience entry points for parsing and rendering.

These functions wire the Markdown parser and the attributed renderer
together for the common cases. Use the classes directly when a parser or
renderer instance should be reused across many documents.

Examples
--------
    >>> from markrun.api import markdown_to_attributed
    >>> result = markdown_to_attributed("# Title\\n\\nHello **world**")
    >>> result.text
    'Title\\n\\nHello world'

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Optional, Union

from markrun.ast.nodes import Document
from markrun.attributed import AttributedString
from markrun.options.attributed import AttributedRendererOptions
from markrun.options.markdown import MarkdownParserOptions
from markrun.parsers.markdown import MarkdownToAstConverter
from markrun.renderers.attributed import AttributedRenderer
from markrun.styling.backend import StyleBackend

logger = logging.getLogger(__name__)

MarkdownSource = Union[str, Path, IO[bytes], IO[str], bytes]


def parse_markdown(source: MarkdownSource, options: Optional[MarkdownParserOptions] = None) -> Document:
    """Parse Markdown into an AST document.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], or bytes
        Markdown text, or a path, stream or bytes holding it. A ``str`` is
        always treated as Markdown content, never as a file name.
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        Root of the parsed tree

    """
    return MarkdownToAstConverter(options).parse(source)


def render_attributed(
    document: Document,
    options: Optional[AttributedRendererOptions] = None,
    backend: Optional[StyleBackend] = None,
) -> AttributedString:
    """Render an AST document to attributed runs.

    Parameters
    ----------
    document : Document
        Root of the tree to render
    options : AttributedRendererOptions or None, default = None
        Renderer configuration
    backend : StyleBackend or None, default = None
        Font provider and measurer; the reportlab backend when omitted

    Returns
    -------
    AttributedString
        Rendered runs in document order

    """
    return AttributedRenderer(options, backend=backend).render(document)


def markdown_to_attributed(
    source: MarkdownSource,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[AttributedRendererOptions] = None,
    backend: Optional[StyleBackend] = None,
) -> AttributedString:
    """Parse Markdown and render it to attributed runs in one step."""
    document = parse_markdown(source, parser_options)
    logger.debug("Parsed markdown into %d top-level blocks", document.child_count)
    return render_attributed(document, renderer_options, backend=backend)
