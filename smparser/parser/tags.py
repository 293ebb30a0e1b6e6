"""
Splitting a buffer into ``#MARKER:value:value;`` tags.
"""
from collections.abc import Iterable
from dataclasses import dataclass, field

from .base import DiagnosticSink
from .cursor import Cursor

__all__ = [
    "TAG_OPEN",
    "VALUE_SEPARATOR",
    "TAG_TERMINATOR",
    "CHART_MARKERS",
    "SongTag",
    "TagListBuilder",
    "read_tags",
]

TAG_OPEN = "#"
VALUE_SEPARATOR = ":"
TAG_TERMINATOR = ";"
CHART_MARKERS = frozenset({"NOTES", "NOTES2"})
"""Markers that carry note charts. A file has one of these per chart, so they are never deduplicated."""


@dataclass
class SongTag:
    """A marker and its values, as read from the file."""

    marker: str
    values: list[str] = field(default_factory=list)

    def value(self, index: int = 0) -> str | None:
        """Return the value at ``index``, or `None` if the tag does not have that many values."""
        if 0 <= index < len(self.values):
            return self.values[index]
        return None


def _clean(s: str) -> str:
    return s.strip().removesuffix(TAG_TERMINATOR).strip()


class TagListBuilder:
    """
    Builds the tag list of one file, keeping at most one tag per marker.

    Chart markers are exempt: every occurrence is kept.
    """

    def __init__(self, sink: DiagnosticSink, chart_markers: Iterable[str] = CHART_MARKERS):
        self._sink = sink
        self._chart_markers = frozenset(chart_markers)
        self._seen: set[str] = set()
        self.tags: list[SongTag] = []

    def is_duplicate(self, marker: str) -> bool:
        return marker not in self._chart_markers and marker in self._seen

    def accept(self, marker: str, cursor: Cursor) -> bool:
        """
        Decide whether the tag that starts with ``marker`` is kept.

        A duplicate is reported, and the cursor is moved to the next tag so that its values are never read.

        :returns: `True` if the tag should be read, `False` if it was skipped.
        """
        if self.is_duplicate(marker):
            self._sink.warning('The song file contains a duplicate "{0}" tag in it, ignoring.', marker)
            if not cursor.is_at_end and cursor.peek() != TAG_OPEN:
                cursor.read_until(TAG_OPEN)
            return False
        self._seen.add(marker)
        return True

    def add(self, tag: SongTag) -> None:
        self.tags.append(tag)


def read_tags(cursor: Cursor, sink: DiagnosticSink, chart_markers: Iterable[str] = CHART_MARKERS) -> list[SongTag]:
    """
    Read every tag from the cursor position to the end of the buffer.

    Anything before the first ``#`` is ignored. Markers are upper-cased. Values have surrounding whitespace removed,
    and the last value of a tag loses its terminating ``;``.

    :param cursor: The cursor to read from.
    :param sink: Where duplicate tags are reported.
    :param chart_markers: Markers that may appear more than once.
    :returns: The tags in file order.
    """
    builder = TagListBuilder(sink, chart_markers)

    cursor.read_until(TAG_OPEN)
    while not cursor.is_at_end:
        cursor.skip(1)
        marker = _clean(cursor.read_until(VALUE_SEPARATOR, TAG_OPEN)).upper()

        if not builder.accept(marker, cursor):
            continue

        values: list[str] = []
        while not cursor.is_at_end and cursor.peek() == VALUE_SEPARATOR:
            cursor.skip(1)
            values.append(cursor.read_until(VALUE_SEPARATOR, TAG_OPEN))

        if values:
            values = [v.strip() for v in values[:-1]] + [_clean(values[-1])]
        tag = SongTag(marker, values)
        sink.verbose('Read tag "{0}" with {1} value(s).', tag.marker, len(tag.values))
        builder.add(tag)

    return builder.tags
