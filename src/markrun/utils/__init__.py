#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/utils/__init__.py
"""Shared utilities for markrun parsers and renderers."""
