#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/__init__.py
"""markrun - Markdown to attributed text runs.

markrun parses Markdown into a small abstract syntax tree and renders that
tree into an ordered sequence of attributed runs: pieces of text paired with
a font, colors, strikethrough, link targets and paragraph styles carrying
tab stops and indents. The runs are ready to hand to any text layout engine.

Key Features
------------
- Markdown parsing with mistune, including strikethrough and task lists
- Tree nodes that know their parent and position among siblings
- Nested list layout with right-aligned markers and hanging indents
- Block quotes with their own margins and a muted color
- Pluggable font backend; the default measures text with reportlab

Requirements
------------
- Python 3.10+
- mistune and reportlab

Examples
--------
    >>> from markrun import markdown_to_attributed
    >>> result = markdown_to_attributed("- one\\n- two")
    >>> [run.text for run in result]
    ['\\t•\\t', 'one', '\\n', '\\t•\\t', 'two']

Working with the AST directly:

    >>> from markrun import AttributedRenderer, parse_markdown
    >>> doc = parse_markdown("Some *emphasis*")
    >>> runs = AttributedRenderer().render(doc)

See Also
--------
markrun.ast : AST node definitions and structural helpers
markrun.renderers : Attributed renderer
markrun.styling : Font descriptors and backends

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "markrun requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from markrun.api import markdown_to_attributed, parse_markdown, render_attributed  # noqa: E402
from markrun.attributed import AttributedRun, AttributedString, AttributeKey  # noqa: E402
from markrun.exceptions import (  # noqa: E402
    DependencyError,
    InvalidOptionsError,
    MarkrunError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from markrun.options import AttributedRendererOptions, MarkdownParserOptions  # noqa: E402
from markrun.parsers.markdown import MarkdownToAstConverter  # noqa: E402
from markrun.renderers.attributed import AttributedRenderer  # noqa: E402

__all__ = [
    "__version__",
    "parse_markdown",
    "render_attributed",
    "markdown_to_attributed",
    "AttributedRun",
    "AttributedString",
    "AttributeKey",
    "AttributedRenderer",
    "AttributedRendererOptions",
    "MarkdownParserOptions",
    "MarkdownToAstConverter",
    "MarkrunError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "DependencyError",
]
