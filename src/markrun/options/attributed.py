#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/options/attributed.py
"""Configuration options for rendering the AST into attributed runs.

The defaults reproduce the classic layout: 15pt body text, headings sized
``28 - 2 * level`` and list markers indented 15pt plus 20pt per nesting level.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markrun.constants import (
    DEFAULT_BASE_FONT_SIZE,
    DEFAULT_BASE_LEFT_MARGIN,
    DEFAULT_BULLET,
    DEFAULT_CODE_SIZE_DELTA,
    DEFAULT_DROP_UNSAFE_LINKS,
    DEFAULT_FONT_FAMILY,
    DEFAULT_HEADING_BASE_SIZE,
    DEFAULT_HEADING_SIZE_STEP,
    DEFAULT_MARKER_SPACING,
    DEFAULT_MONOSPACE_FAMILY,
    DEFAULT_NESTING_INDENT,
)
from markrun.options.base import BaseRendererOptions
from markrun.styling.fonts import NamedColor


@dataclass(frozen=True)
class AttributedRendererOptions(BaseRendererOptions):
    """Configuration options for the attributed renderer.

    Parameters
    ----------
    base_font_size : float, default 15.0
        Point size of body text and separators
    font_family : str, default "Helvetica"
        Body font family, used when the renderer builds its own backend
    monospace_family : str, default "Courier"
        Code font family, used when the renderer builds its own backend
    code_size_delta : float, default 1.0
        Code is set this many points below ``base_font_size``
    heading_base_size : float, default 28.0
        Heading size is ``heading_base_size - heading_size_step * level``
    heading_size_step : float, default 2.0
        Points removed per heading level
    base_left_margin : float, default 15.0
        Indent of top-level list markers and quotes
    nesting_indent : float, default 20.0
        Extra indent per nesting level
    marker_spacing : float, default 8.0
        Gap between a list marker column and the item text
    bullet : str, default "•"
        Glyph used for unordered list markers
    link_color : NamedColor, default NamedColor.BLUE
        Foreground color of link text
    muted_color : NamedColor, default NamedColor.GRAY
        Foreground color of code and quoted text
    drop_unsafe_links : bool, default False
        Treat destinations with dangerous schemes (``javascript:`` etc.) as
        unparseable, so the text is colored but not linked

    """

    base_font_size: float = field(
        default=DEFAULT_BASE_FONT_SIZE,
        metadata={"help": "Point size of body text", "type": float, "importance": "core"},
    )
    font_family: str = field(
        default=DEFAULT_FONT_FAMILY,
        metadata={"help": "Body font family", "importance": "core"},
    )
    monospace_family: str = field(
        default=DEFAULT_MONOSPACE_FAMILY,
        metadata={"help": "Code font family", "importance": "core"},
    )
    code_size_delta: float = field(
        default=DEFAULT_CODE_SIZE_DELTA,
        metadata={"help": "Points subtracted from the base size for code", "type": float, "importance": "advanced"},
    )
    heading_base_size: float = field(
        default=DEFAULT_HEADING_BASE_SIZE,
        metadata={"help": "Heading size before the per-level step is removed", "type": float, "importance": "advanced"},
    )
    heading_size_step: float = field(
        default=DEFAULT_HEADING_SIZE_STEP,
        metadata={"help": "Points removed per heading level", "type": float, "importance": "advanced"},
    )
    base_left_margin: float = field(
        default=DEFAULT_BASE_LEFT_MARGIN,
        metadata={"help": "Indent of top-level lists and quotes", "type": float, "importance": "advanced"},
    )
    nesting_indent: float = field(
        default=DEFAULT_NESTING_INDENT,
        metadata={"help": "Extra indent per nesting level", "type": float, "importance": "advanced"},
    )
    marker_spacing: float = field(
        default=DEFAULT_MARKER_SPACING,
        metadata={"help": "Gap between list marker and item text", "type": float, "importance": "advanced"},
    )
    bullet: str = field(
        default=DEFAULT_BULLET,
        metadata={"help": "Unordered list marker glyph", "importance": "core"},
    )
    link_color: NamedColor = field(
        default=NamedColor.BLUE,
        metadata={"help": "Link text color", "choices": [c.name.lower() for c in NamedColor], "importance": "core"},
    )
    muted_color: NamedColor = field(
        default=NamedColor.GRAY,
        metadata={
            "help": "Color of code and block quotes",
            "choices": [c.name.lower() for c in NamedColor],
            "importance": "core",
        },
    )
    drop_unsafe_links: bool = field(
        default=DEFAULT_DROP_UNSAFE_LINKS,
        metadata={"help": "Do not link destinations with dangerous schemes", "importance": "security"},
    )

    def __post_init__(self) -> None:
        """Validate sizes and spacing.

        Raises
        ------
        ValueError
            If any size is not positive, any spacing is negative, or the
            bullet is empty.

        """
        super().__post_init__()

        if self.base_font_size <= 0:
            raise ValueError(f"base_font_size must be positive, got {self.base_font_size}")
        if self.base_font_size - self.code_size_delta <= 0:
            raise ValueError(
                f"code_size_delta ({self.code_size_delta}) leaves no positive code size "
                f"for base_font_size {self.base_font_size}"
            )
        if self.heading_base_size - 6 * self.heading_size_step <= 0:
            raise ValueError(
                f"heading_base_size {self.heading_base_size} with step {self.heading_size_step} "
                f"gives a non-positive size for level 6 headings"
            )
        for name in ("base_left_margin", "nesting_indent", "marker_spacing"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        if not self.bullet:
            raise ValueError("bullet must be a non-empty string")
