#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Pytest configuration and shared fixtures for the markrun test suite.

This module provides a deterministic styling backend so layout geometry can
be asserted exactly, plus renderer fixtures built on it.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

import pytest

from markrun.options import AttributedRendererOptions
from markrun.renderers.attributed import AttributedRenderer
from markrun.styling.backend import StyleBackend
from markrun.styling.fonts import FontDescriptor, FontTrait, FontWeight

_SUFFIXES = {
    FontTrait.NONE: "",
    FontTrait.BOLD: "-Bold",
    FontTrait.ITALIC: "-Italic",
    FontTrait.BOLD | FontTrait.ITALIC: "-BoldItalic",
}


class FakeStyleBackend(StyleBackend):
    """Backend with predictable faces and widths.

    Every character is half the point size wide, and faces are named
    ``<family><suffix>`` for the trait combination.
    """

    def __init__(self, family: str = "Body", monospace_family: str = "Mono") -> None:
        self.family = family
        self.monospace_family = monospace_family
        self.measured: list[tuple[str, FontDescriptor]] = []

    def _font(self, family: str, size: float, weight: FontWeight, **flags: bool) -> FontDescriptor:
        traits = FontTrait.BOLD if weight == FontWeight.BOLD else FontTrait.NONE
        return FontDescriptor(family=family, face=family + _SUFFIXES[traits], size=size, traits=traits, **flags)

    def system_font(self, size: float, weight: FontWeight = FontWeight.REGULAR) -> FontDescriptor:
        return self._font(self.family, size, weight)

    def monospaced_font(self, size: float, weight: FontWeight = FontWeight.REGULAR) -> FontDescriptor:
        return self._font(self.monospace_family, size, weight, monospaced=True)

    def monospaced_digit_font(self, size: float, weight: FontWeight = FontWeight.REGULAR) -> FontDescriptor:
        return self._font(self.family, size, weight, monospaced_digits=True)

    def with_traits(
        self, font: FontDescriptor, traits: FontTrait, point_size: Optional[float] = None
    ) -> FontDescriptor:
        combined = font.traits | traits
        return replace(
            font,
            face=font.family + _SUFFIXES[combined],
            traits=combined,
            size=font.size if point_size is None else point_size,
        )

    def measure(self, text: str, font: FontDescriptor) -> float:
        self.measured.append((text, font))
        return len(text) * font.size * 0.5


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def fake_backend() -> FakeStyleBackend:
    """Provide a deterministic styling backend."""
    return FakeStyleBackend()


@pytest.fixture
def renderer(fake_backend: FakeStyleBackend) -> AttributedRenderer:
    """Provide an attributed renderer with default options and the fake backend."""
    return AttributedRenderer(AttributedRendererOptions(), backend=fake_backend)
