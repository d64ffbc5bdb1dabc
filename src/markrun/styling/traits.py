#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/styling/traits.py
"""Trait composition over attributed fragments."""

from __future__ import annotations

from typing import Optional

from markrun.attributed import AttributedString
from markrun.styling.backend import StyleBackend
from markrun.styling.fonts import FontTrait


def apply_traits(
    fragment: AttributedString,
    traits: FontTrait,
    backend: StyleBackend,
    point_size: Optional[float] = None,
) -> None:
    """Add ``traits`` to every font in ``fragment``, in place.

    Each run keeps the traits its font already had, so italic applied to a
    bold run yields bold-italic. Applying a trait the font already carries
    leaves it unchanged. Colors, links and paragraph styles are untouched.

    Parameters
    ----------
    fragment : AttributedString
        Rendered fragment to restyle
    traits : FontTrait
        Traits to add
    backend : StyleBackend
        Backend that resolves the composed font
    point_size : float or None, default = None
        Replacement point size, or None to keep each run's size

    """
    fragment.map_fonts(lambda font: backend.with_traits(font, traits, point_size))
