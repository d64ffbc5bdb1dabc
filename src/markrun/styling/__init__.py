#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/styling/__init__.py
"""Font, color and measurement primitives used by the renderer."""

from markrun.styling.backend import StyleBackend
from markrun.styling.fonts import FontDescriptor, FontTrait, FontWeight, NamedColor
from markrun.styling.reportlab_backend import ReportLabStyleBackend

__all__ = [
    "FontDescriptor",
    "FontTrait",
    "FontWeight",
    "NamedColor",
    "StyleBackend",
    "ReportLabStyleBackend",
]
