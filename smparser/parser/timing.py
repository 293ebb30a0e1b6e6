"""
Reading the ``OFFSET``, ``BPMS`` and ``STOPS``/``FREEZE`` tags into the song timeline.
"""
from collections.abc import Callable
from typing import TypeVar

from .base import DiagnosticSink
from .tags import SongTag
from ..classes.timing import SongBpmSegment, SongStopSegment
from ..utils import convert_offset_to_row, parse_float

__all__ = [
    "parse_offset",
    "parse_bpm_segments",
    "parse_stop_segments",
]

PAIR_SEPARATOR = ","
PAIR_ASSIGNMENT = "="

S = TypeVar("S", SongBpmSegment, SongStopSegment)


def parse_offset(tag: SongTag, sink: DiagnosticSink) -> float:
    """
    Read the offset of the first beat, in seconds.

    :returns: The offset, or 0.0 if it is missing or cannot be parsed.
    """
    value = tag.value()
    try:
        if value is None:
            raise ValueError("no value given")
        return parse_float(value)
    except ValueError:
        sink.warning("Unable to parse the {0} value so setting the first beat offset to 0 seconds.", tag.marker)
        return 0.0


def _parse_pairs(
    tag: SongTag,
    sink: DiagnosticSink,
    magnitude_name: str,
    make_segment: Callable[[int, float], S],
) -> list[S]:
    value = tag.value()
    if value is None:
        sink.warning("The {0} tag has no value so it contributes no segments.", tag.marker)
        return []

    segments: list[S] = []
    for expression in value.split(PAIR_SEPARATOR):
        expression = expression.strip()
        if not expression:
            continue

        pair = [part.strip() for part in expression.split(PAIR_ASSIGNMENT, 1)]
        if len(pair) != 2 or not all(pair):
            sink.warning('The expression of "{0}" in the {1} section is invalid so skipping it.', expression, tag.marker)
            continue
        offset_str, magnitude_str = pair

        try:
            offset = parse_float(offset_str)
        except ValueError:
            sink.warning('The {0} offset of "{1}" is not valid so skipping it.', tag.marker, offset_str)
            continue
        try:
            magnitude = parse_float(magnitude_str)
        except ValueError:
            sink.warning('The {0} {1} of "{2}" is not valid so skipping it.', tag.marker, magnitude_name, magnitude_str)
            continue

        segments.append(make_segment(convert_offset_to_row(offset), magnitude))
    return segments


def parse_bpm_segments(tag: SongTag, sink: DiagnosticSink) -> list[SongBpmSegment]:
    """
    Read a list of ``offset=bpm`` pairs.

    Malformed pairs are reported and skipped; the others are returned in file order.
    """
    return _parse_pairs(tag, sink, "value", SongBpmSegment)


def parse_stop_segments(tag: SongTag, sink: DiagnosticSink) -> list[SongStopSegment]:
    """
    Read a list of ``offset=seconds`` pairs.

    Malformed pairs are reported and skipped; the others are returned in file order.
    """
    return _parse_pairs(tag, sink, "length", SongStopSegment)
