#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class renderers inherit from. It
provides options handling and the shared structural checks a renderer runs
before walking a tree.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from markrun.ast.nodes import Node
from markrun.exceptions import InvalidOptionsError, RenderingError
from markrun.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options or BaseRendererOptions()

    @abstractmethod
    def render(self, doc: Node) -> Any:
        """Render the tree rooted at ``doc`` and return the result.

        Parameters
        ----------
        doc : Node
            Root of the tree to render, usually a Document

        Raises
        ------
        RenderingError
            If the tree is cyclic or nested too deeply

        """
        pass

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    def _check_tree(self, root: Node) -> None:
        """Reject trees that are cyclic or deeper than ``max_nesting_depth``.

        The walk is iterative so a malformed tree cannot exhaust the stack
        before it is rejected.

        """
        max_depth = self.options.max_nesting_depth
        seen: set[int] = set()
        stack: list[tuple[Node, int]] = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            if id(node) in seen:
                raise RenderingError(
                    f"{type(node).__name__} node appears more than once in the tree",
                    rendering_stage="structure_check",
                )
            seen.add(id(node))
            if depth > max_depth:
                raise RenderingError(
                    f"Tree nesting exceeds max_nesting_depth ({max_depth})",
                    rendering_stage="structure_check",
                )
            stack.extend((child, depth + 1) for child in node.children)
