#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/renderers/__init__.py
"""Renderers that turn the markrun AST into styled output."""

from markrun.renderers.attributed import AttributedRenderer
from markrun.renderers.base import BaseRenderer

__all__ = ["AttributedRenderer", "BaseRenderer"]
