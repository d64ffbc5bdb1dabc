#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrun/attributed.py
"""Attributed text runs produced by the renderer.

An :class:`AttributedString` is an ordered sequence of :class:`AttributedRun`
values. Each run is a contiguous piece of text with a fully resolved mapping
of attributes. Adjacent runs are never merged, so attribute boundaries stay
exactly where the renderer produced them.

Examples
--------
    >>> from markrun.attributed import AttributeKey, AttributedString
    >>> s = AttributedString.from_text("Hello", {AttributeKey.LINK: "https://example.com"})
    >>> s.append(AttributedString.from_text(" world"))
    >>> s.text
    'Hello world'
    >>> [(start, end) for start, end, _ in s.attribute_ranges()]
    [(0, 5), (5, 11)]

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional

from markrun.styling.fonts import FontDescriptor


class AttributeKey(str, Enum):
    """Names of the attributes a run may carry."""

    FONT = "font"
    FOREGROUND_COLOR = "foreground_color"
    STRIKETHROUGH = "strikethrough"
    LINK = "link"
    PARAGRAPH_STYLE = "paragraph_style"
    NESTING_DEPTH = "nesting_depth"


class StrikethroughStyle(str, Enum):
    """Values for the strikethrough attribute."""

    SINGLE = "single"


class TextAlignment(str, Enum):
    """Alignment rule of a tab stop."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class TabStop:
    """Horizontal position with an alignment rule, in font units (points)."""

    alignment: TextAlignment
    location: float


@dataclass(frozen=True)
class ParagraphStyle:
    """Tab stops and head indent applied to a paragraph.

    Parameters
    ----------
    tab_stops : tuple of TabStop, default = ()
        Ordered tab stops
    head_indent : float, default = 0.0
        Offset of every wrapped line after the first

    """

    tab_stops: tuple[TabStop, ...] = ()
    head_indent: float = 0.0


@dataclass(frozen=True)
class AttributedRun:
    """A contiguous string of text plus its attributes."""

    text: str
    attributes: Mapping[AttributeKey, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze the attribute mapping."""
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def __len__(self) -> int:
        return len(self.text)

    @property
    def font(self) -> Optional[FontDescriptor]:
        """Return the run's font attribute, if any."""
        return self.attributes.get(AttributeKey.FONT)

    def get(self, key: AttributeKey, default: Any = None) -> Any:
        """Return the value of ``key`` or ``default``."""
        return self.attributes.get(key, default)

    def with_attributes(self, updates: Mapping[AttributeKey, Any]) -> AttributedRun:
        """Return a copy of this run with ``updates`` merged over its attributes."""
        return AttributedRun(self.text, {**self.attributes, **updates})


class AttributedString:
    """Ordered, unmerged sequence of attributed runs.

    Parameters
    ----------
    runs : iterable of AttributedRun, optional
        Initial runs, kept in order. Runs with empty text are kept too.

    """

    def __init__(self, runs: Iterable[AttributedRun] = ()) -> None:
        self._runs: list[AttributedRun] = list(runs)

    @classmethod
    def from_text(cls, text: str, attributes: Mapping[AttributeKey, Any] | None = None) -> AttributedString:
        """Create a string holding a single run."""
        return cls([AttributedRun(text, attributes or {})])

    @property
    def runs(self) -> tuple[AttributedRun, ...]:
        """Return the runs in order."""
        return tuple(self._runs)

    @property
    def text(self) -> str:
        """Return the concatenated text of all runs."""
        return "".join(run.text for run in self._runs)

    def __len__(self) -> int:
        return sum(len(run) for run in self._runs)

    def __iter__(self) -> Iterator[AttributedRun]:
        return iter(self._runs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributedString):
            return NotImplemented
        return self._runs == other._runs

    def __repr__(self) -> str:
        return f"AttributedString({self._runs!r})"

    def append(self, other: AttributedString) -> None:
        """Append the runs of ``other`` to the end."""
        self._runs.extend(other._runs)

    def prepend(self, other: AttributedString) -> None:
        """Insert the runs of ``other`` at the start."""
        self._runs[:0] = other._runs

    def add_attribute(self, key: AttributeKey, value: Any) -> None:
        """Set ``key`` to ``value`` over the whole string, replacing existing values."""
        self._runs = [run.with_attributes({key: value}) for run in self._runs]

    def map_fonts(self, transform: Callable[[FontDescriptor], FontDescriptor]) -> None:
        """Replace the font of every run that has one.

        Runs without a font attribute are left alone, as are all other
        attributes of the transformed runs.
        """
        updated: list[AttributedRun] = []
        for run in self._runs:
            font = run.font
            if font is None:
                updated.append(run)
            else:
                updated.append(run.with_attributes({AttributeKey.FONT: transform(font)}))
        self._runs = updated

    def attribute_ranges(self) -> list[tuple[int, int, Mapping[AttributeKey, Any]]]:
        """Return ``(start, end, attributes)`` for each run, in character offsets."""
        ranges = []
        offset = 0
        for run in self._runs:
            end = offset + len(run)
            ranges.append((offset, end, run.attributes))
            offset = end
        return ranges

    def enumerate_attribute(self, key: AttributeKey) -> Iterator[tuple[int, int, Any]]:
        """Yield maximal ``(start, end, value)`` ranges sharing one value of ``key``.

        Ranges where the attribute is absent are reported with a value of None.
        """
        current_start = 0
        current_end = 0
        current_value: Any = None
        started = False
        for start, end, attributes in self.attribute_ranges():
            value = attributes.get(key)
            if started and value == current_value:
                current_end = end
                continue
            if started:
                yield current_start, current_end, current_value
            current_start, current_end, current_value = start, end, value
            started = True
        if started:
            yield current_start, current_end, current_value

    def to_dict(self) -> list[dict[str, Any]]:
        """Return a JSON-friendly description of the runs, for debugging."""
        return [
            {"text": run.text, **{key.value: _plain(value) for key, value in run.attributes.items()}} for run in self
        ]


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, FontDescriptor):
        return {"face": value.face, "size": value.size}
    if isinstance(value, ParagraphStyle):
        return {
            "tab_stops": [(stop.alignment.value, stop.location) for stop in value.tab_stops],
            "head_indent": value.head_indent,
        }
    return value
