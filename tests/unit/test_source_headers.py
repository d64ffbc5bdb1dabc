#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_source_headers.py
"""Tests for the license header carried by every package module."""

from pathlib import Path

import pytest

import markrun

PACKAGE_ROOT = Path(markrun.__file__).parent
SOURCE_FILES = sorted(PACKAGE_ROOT.rglob("*.py"))


@pytest.mark.unit
@pytest.mark.parametrize("path", SOURCE_FILES, ids=lambda path: path.relative_to(PACKAGE_ROOT).as_posix())
def test_module_header(path):
    """Test each module opens with the copyright line and its repository path."""
    lines = path.read_text(encoding="utf-8").splitlines()
    relative = path.relative_to(PACKAGE_ROOT.parent.parent).as_posix()
    assert lines[:3] == ["#  Copyright (c) 2025 Tom Villani, Ph.D.", "#", f"# {relative}"]
