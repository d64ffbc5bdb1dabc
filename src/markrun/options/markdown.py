#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/options/markdown.py
"""Configuration options for parsing Markdown into the markrun AST."""

from __future__ import annotations

from dataclasses import dataclass, field

from markrun.constants import DEFAULT_PARSE_STRIKETHROUGH, DEFAULT_PARSE_TASK_LISTS
from markrun.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_strikethrough : bool, default True
        Recognize GFM ``~~strikethrough~~`` spans
    parse_task_lists : bool, default True
        Recognize ``- [ ]`` / ``- [x]`` task list items

    """

    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={"help": "Parse ~~strikethrough~~ syntax", "importance": "core"},
    )
    parse_task_lists: bool = field(
        default=DEFAULT_PARSE_TASK_LISTS,
        metadata={"help": "Parse task list checkboxes", "importance": "core"},
    )
