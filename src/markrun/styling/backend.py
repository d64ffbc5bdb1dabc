#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/styling/backend.py
"""Styling backend interface.

The renderer talks to fonts only through a :class:`StyleBackend`. A backend
creates font descriptors, composes bold/italic traits onto them and measures
text. Implementations must never raise from these methods: missing variants
fall back to a substitute face and unmeasurable text gets a deterministic
fallback width.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from markrun.styling.fonts import FontDescriptor, FontTrait, FontWeight


class StyleBackend(ABC):
    """Abstract base class for font providers and text measurement."""

    @abstractmethod
    def system_font(self, size: float, weight: FontWeight = FontWeight.REGULAR) -> FontDescriptor:
        """Return the proportional body font at ``size``."""
        pass

    @abstractmethod
    def monospaced_font(self, size: float, weight: FontWeight = FontWeight.REGULAR) -> FontDescriptor:
        """Return the fixed-pitch font used for code at ``size``."""
        pass

    @abstractmethod
    def monospaced_digit_font(self, size: float, weight: FontWeight = FontWeight.REGULAR) -> FontDescriptor:
        """Return the body font with uniform-width digits at ``size``."""
        pass

    @abstractmethod
    def with_traits(
        self, font: FontDescriptor, traits: FontTrait, point_size: Optional[float] = None
    ) -> FontDescriptor:
        """Return ``font`` with ``traits`` added to the ones it already has.

        Parameters
        ----------
        font : FontDescriptor
            Font to derive from
        traits : FontTrait
            Traits to add. Existing traits are kept.
        point_size : float or None, default = None
            New point size, or None to keep the current size

        """
        pass

    @abstractmethod
    def measure(self, text: str, font: FontDescriptor) -> float:
        """Return the advance width of ``text`` set in ``font``, in points."""
        pass
