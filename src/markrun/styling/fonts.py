#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/styling/fonts.py
"""Font descriptions and style tokens shared by styling backends.

A :class:`FontDescriptor` is the opaque font value stored in attributed runs.
Backends create descriptors and compose traits onto them; the renderer never
builds one by hand.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto


class FontTrait(Flag):
    """Font style flags that compose additively."""

    NONE = 0
    ITALIC = auto()
    BOLD = auto()


class FontWeight(str, Enum):
    """Font weights requested from a backend."""

    REGULAR = "regular"
    BOLD = "bold"


class NamedColor(str, Enum):
    """Opaque color tokens attached as foreground colors.

    The value is an sRGB hex string consumers can use directly.
    """

    GRAY = "#8E8E93"
    BLUE = "#007AFF"

    @property
    def hex(self) -> str:
        """Return the ``#RRGGBB`` value of the token."""
        return self.value


@dataclass(frozen=True)
class FontDescriptor:
    """Resolved font used by a run.

    Parameters
    ----------
    family : str
        Family the font was requested from (e.g., "Helvetica")
    face : str
        Concrete face name the backend resolved (e.g., "Helvetica-BoldOblique")
    size : float
        Point size
    traits : FontTrait, default = FontTrait.NONE
        Bold/italic traits carried by the font
    monospaced : bool, default = False
        Whether every glyph has the same advance
    monospaced_digits : bool, default = False
        Whether digits have a uniform advance (tabular figures)

    """

    family: str
    face: str
    size: float
    traits: FontTrait = FontTrait.NONE
    monospaced: bool = False
    monospaced_digits: bool = False

    @property
    def bold(self) -> bool:
        """Whether the font carries the bold trait."""
        return FontTrait.BOLD in self.traits

    @property
    def italic(self) -> bool:
        """Whether the font carries the italic trait."""
        return FontTrait.ITALIC in self.traits
