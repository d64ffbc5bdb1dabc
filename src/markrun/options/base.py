#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/options/base.py
"""Base classes for parser and renderer options.

This module defines the foundation classes for the frozen option
dataclasses used by the Markdown parser and the attributed renderer.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from markrun.constants import DEFAULT_MAX_NESTING_DEPTH


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Parameters
    ----------
    max_nesting_depth : int, default 128
        Deepest container nesting the renderer will descend into. Deeper or
        cyclic trees raise RenderingError instead of exhausting the stack.

    """

    max_nesting_depth: int = field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        metadata={"help": "Maximum container nesting depth before rendering is aborted", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges for base renderer options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.max_nesting_depth <= 0:
            raise ValueError(f"max_nesting_depth must be positive, got {self.max_nesting_depth}")


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options.

    Parameters
    ----------
    encoding : str, default "utf-8"
        Encoding used to decode bytes, files and binary streams

    """

    encoding: str = field(
        default="utf-8",
        metadata={"help": "Text encoding for byte and file input", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate parser options."""
        if not self.encoding:
            raise ValueError("encoding must be a non-empty string")
