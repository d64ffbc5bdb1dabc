#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/styling/reportlab_backend.py
"""Styling backend built on reportlab font metrics.

Faces are looked up by family and trait combination. The standard PDF
families (Helvetica, Times, Courier) are always available; any TrueType or
Type 1 font registered with reportlab can be used as a family too, as long as
its variants follow the ``Family-Bold`` / ``Family-Italic`` /
``Family-BoldItalic`` naming convention.

When a variant cannot be found the backend walks a fallback list: the
requested family, then the matching Helvetica variant (e.g.
``Helvetica-BoldOblique``), then the plain base font.

"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional

from markrun.constants import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_MONOSPACE_FAMILY,
    DEPS_REPORTLAB,
    FALLBACK_AVERAGE_ADVANCE,
    FALLBACK_FONT_FAMILY,
)
from markrun.styling.backend import StyleBackend
from markrun.styling.fonts import FontDescriptor, FontTrait, FontWeight
from markrun.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

_BOLD_ITALIC = FontTrait.BOLD | FontTrait.ITALIC

# Face names of the standard 14 PDF fonts, keyed by family then traits
_STANDARD_FACES: dict[str, dict[FontTrait, str]] = {
    "Helvetica": {
        FontTrait.NONE: "Helvetica",
        FontTrait.BOLD: "Helvetica-Bold",
        FontTrait.ITALIC: "Helvetica-Oblique",
        _BOLD_ITALIC: "Helvetica-BoldOblique",
    },
    "Times": {
        FontTrait.NONE: "Times-Roman",
        FontTrait.BOLD: "Times-Bold",
        FontTrait.ITALIC: "Times-Italic",
        _BOLD_ITALIC: "Times-BoldItalic",
    },
    "Courier": {
        FontTrait.NONE: "Courier",
        FontTrait.BOLD: "Courier-Bold",
        FontTrait.ITALIC: "Courier-Oblique",
        _BOLD_ITALIC: "Courier-BoldOblique",
    },
}

# Name suffixes tried for registered (non-standard) families
_VARIANT_SUFFIXES: dict[FontTrait, tuple[str, ...]] = {
    FontTrait.NONE: ("", "-Regular", "-Roman"),
    FontTrait.BOLD: ("-Bold",),
    FontTrait.ITALIC: ("-Italic", "-Oblique"),
    _BOLD_ITALIC: ("-BoldItalic", "-BoldOblique"),
}


class ReportLabStyleBackend(StyleBackend):
    """Resolve fonts and measure text with reportlab.

    Parameters
    ----------
    font_family : str, default "Helvetica"
        Family used for body text and list markers
    monospace_family : str, default "Courier"
        Family used for inline code and code blocks

    Examples
    --------
        >>> backend = ReportLabStyleBackend()
        >>> font = backend.system_font(15.0)
        >>> backend.with_traits(font, FontTrait.BOLD).face
        'Helvetica-Bold'

    """

    @requires_dependencies("reportlab", DEPS_REPORTLAB)
    def __init__(self, font_family: str = DEFAULT_FONT_FAMILY, monospace_family: str = DEFAULT_MONOSPACE_FAMILY):
        from reportlab.pdfbase import pdfmetrics

        self._pdfmetrics: Any = pdfmetrics
        self.font_family = font_family
        self.monospace_family = monospace_family

    def system_font(self, size: float, weight: FontWeight = FontWeight.REGULAR) -> FontDescriptor:
        """Return the body font at ``size``."""
        return self._make_font(self.font_family, size, weight)

    def monospaced_font(self, size: float, weight: FontWeight = FontWeight.REGULAR) -> FontDescriptor:
        """Return the code font at ``size``."""
        return self._make_font(self.monospace_family, size, weight, monospaced=True)

    def monospaced_digit_font(self, size: float, weight: FontWeight = FontWeight.REGULAR) -> FontDescriptor:
        """Return the body font flagged for tabular digits.

        The standard PDF families already set all digits on a uniform advance,
        so the face is the same as :meth:`system_font`.
        """
        return self._make_font(self.font_family, size, weight, monospaced_digits=True)

    def with_traits(
        self, font: FontDescriptor, traits: FontTrait, point_size: Optional[float] = None
    ) -> FontDescriptor:
        """Return ``font`` with ``traits`` unioned into its existing traits."""
        combined = font.traits | traits
        return replace(
            font,
            face=self._resolve_face(font.family, combined),
            traits=combined,
            size=font.size if point_size is None else point_size,
        )

    def measure(self, text: str, font: FontDescriptor) -> float:
        """Return the width of ``text`` in ``font``.

        Text reportlab cannot measure is given an average advance of
        ``FALLBACK_AVERAGE_ADVANCE`` times the point size per character.
        """
        try:
            return float(self._pdfmetrics.stringWidth(text, font.face, font.size))
        except (KeyError, ValueError, TypeError) as exc:
            logger.debug("Could not measure %r in %s (%s); using average advance", text, font.face, exc)
            return len(text) * font.size * FALLBACK_AVERAGE_ADVANCE

    def _make_font(
        self,
        family: str,
        size: float,
        weight: FontWeight,
        monospaced: bool = False,
        monospaced_digits: bool = False,
    ) -> FontDescriptor:
        traits = FontTrait.BOLD if weight == FontWeight.BOLD else FontTrait.NONE
        return FontDescriptor(
            family=family,
            face=self._resolve_face(family, traits),
            size=size,
            traits=traits,
            monospaced=monospaced,
            monospaced_digits=monospaced_digits,
        )

    def _resolve_face(self, family: str, traits: FontTrait) -> str:
        """Return the best available face name for ``family`` with ``traits``."""
        for position, candidate in enumerate(self._face_candidates(family, traits)):
            if self._is_available(candidate):
                if position:
                    logger.debug("No %s face for %s; substituting %s", traits, family, candidate)
                return candidate
        logger.debug("No face for %s with %s; using %s", family, traits, FALLBACK_FONT_FAMILY)
        return _STANDARD_FACES[FALLBACK_FONT_FAMILY][FontTrait.NONE]

    def _face_candidates(self, family: str, traits: FontTrait) -> list[str]:
        candidates: list[str] = []
        standard = _STANDARD_FACES.get(family)
        if standard is not None:
            candidates.append(standard[traits])
        else:
            candidates.extend(f"{family}{suffix}" for suffix in _VARIANT_SUFFIXES[traits])
        candidates.append(_STANDARD_FACES[FALLBACK_FONT_FAMILY][traits])
        return candidates

    def _is_available(self, face: str) -> bool:
        if face in self._pdfmetrics.standardFonts:
            return True
        return face in self._pdfmetrics.getRegisteredFontNames()
