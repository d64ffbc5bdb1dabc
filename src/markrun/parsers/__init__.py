#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/parsers/__init__.py
"""Parsers that build the markrun AST from source text."""

from markrun.parsers.base import BaseParser
from markrun.parsers.markdown import MarkdownToAstConverter

__all__ = ["BaseParser", "MarkdownToAstConverter"]
