#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/options/__init__.py
"""Configuration options for markrun parsers and renderers."""

from markrun.options.attributed import AttributedRendererOptions
from markrun.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from markrun.options.markdown import MarkdownParserOptions

__all__ = [
    "CloneFrozenMixin",
    "BaseParserOptions",
    "BaseRendererOptions",
    "AttributedRendererOptions",
    "MarkdownParserOptions",
]
