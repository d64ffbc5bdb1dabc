#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/constants.py
"""Constants and default values for markrun.

This module centralizes the hardcoded values and default configuration
constants used across the library.

Constants are organized by category:
1. Type Definitions
2. Font and Sizing Defaults
3. List and Quote Layout
4. Link Handling
5. Traversal Limits
6. Dependencies
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

TaskStatus = Literal["checked", "unchecked"]

# =============================================================================
# Font and Sizing Defaults
# =============================================================================

DEFAULT_BASE_FONT_SIZE = 15.0
DEFAULT_FONT_FAMILY = "Helvetica"
DEFAULT_MONOSPACE_FAMILY = "Courier"

# Inline code and code blocks are rendered this many points below the base size
DEFAULT_CODE_SIZE_DELTA = 1.0

# Heading point size is HEADING_BASE_SIZE - HEADING_SIZE_STEP * level
DEFAULT_HEADING_BASE_SIZE = 28.0
DEFAULT_HEADING_SIZE_STEP = 2.0

# Faces used when a requested family or variant cannot be resolved
FALLBACK_FONT_FAMILY = "Helvetica"

# Average advance (as a fraction of point size) for text that cannot be measured
FALLBACK_AVERAGE_ADVANCE = 0.5

# =============================================================================
# List and Quote Layout
# =============================================================================

DEFAULT_BASE_LEFT_MARGIN = 15.0
DEFAULT_NESTING_INDENT = 20.0
DEFAULT_MARKER_SPACING = 8.0
DEFAULT_BULLET = "•"

# =============================================================================
# Link Handling
# =============================================================================

DEFAULT_DROP_UNSAFE_LINKS = False

DANGEROUS_SCHEMES = {
    "javascript:",
    "vbscript:",
    "data:text/html",
    "data:text/javascript",
    "data:application/javascript",
    "data:application/x-javascript",
}

# Characters that make a destination unusable as a URL without percent-encoding
INVALID_URL_CHARACTERS = frozenset(' <>"{}|\\^`')

# =============================================================================
# Traversal Limits
# =============================================================================

DEFAULT_MAX_NESTING_DEPTH = 128

# Upper bound on parent-link hops; anything longer is a cycle
MAX_ANCESTOR_WALK = 10_000

# =============================================================================
# Markdown Parsing
# =============================================================================

DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_PARSE_TASK_LISTS = True

# =============================================================================
# Dependencies
# =============================================================================

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
DEPS_REPORTLAB = [("reportlab", "reportlab", ">=4.0")]
