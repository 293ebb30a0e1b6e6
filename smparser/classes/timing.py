"""
Classes that represent the tempo and stop timeline of a song.
"""
from dataclasses import dataclass, field

from .base import Validateable
from ..utils import rows_to_beats

__all__ = [
    "SongBpmSegment",
    "SongStopSegment",
    "SongTimingInfo",
]

DEFAULT_BPM = 60.0
"""Tempo assumed before the first BPM segment, and for songs without any."""


@dataclass(frozen=True)
class SongBpmSegment(Validateable):
    """An immutable class that represents a tempo change taking effect at a row."""

    start_row_index: int
    beats_per_minute: float

    def __post_init__(self):
        self.validate()

    def validate(self):
        if not isinstance(self.start_row_index, int):
            raise ValueError(f"start row index must be an integer (got {self.start_row_index!r})")


@dataclass(frozen=True)
class SongStopSegment(Validateable):
    """An immutable class that represents a playback halt of a fixed real-time duration starting at a row."""

    start_row_index: int
    stop_time_in_seconds: float

    def __post_init__(self):
        self.validate()

    def validate(self):
        if not isinstance(self.start_row_index, int):
            raise ValueError(f"start row index must be an integer (got {self.start_row_index!r})")


@dataclass(frozen=True)
class SongTimingInfo:
    """
    The tempo/stop timeline of a song.

    Segments are kept in the order they appeared in the file. Use :meth:`sorted_bpm_segments` and
    :meth:`sorted_stop_segments` for chronological order.
    """

    bpm_segments: tuple[SongBpmSegment, ...] = field(default_factory=tuple)
    stop_segments: tuple[SongStopSegment, ...] = field(default_factory=tuple)
    first_beat_offset_in_seconds: float = 0.0

    def sorted_bpm_segments(self) -> list[SongBpmSegment]:
        """Return the BPM segments ordered by start row. Segments on the same row keep their file order."""
        return sorted(self.bpm_segments, key=lambda s: s.start_row_index)

    def sorted_stop_segments(self) -> list[SongStopSegment]:
        """Return the stop segments ordered by start row. Segments on the same row keep their file order."""
        return sorted(self.stop_segments, key=lambda s: s.start_row_index)

    def bpm_at_row(self, row: int) -> float:
        """
        Return the tempo in effect at a row.

        When several segments start on the same row, the one that appears last in the file wins.

        :param row: The row to look up.
        :returns: The tempo in beats per minute, or :data:`DEFAULT_BPM` before the first segment.
        """
        bpm = DEFAULT_BPM
        for segment in self.sorted_bpm_segments():
            if segment.start_row_index > row:
                break
            bpm = segment.beats_per_minute
        return bpm

    def seconds_at_row(self, row: int) -> float:
        """
        Return the song time at which a row is reached.

        Row indices are treated as true beat rows. Tempo is integrated over the BPM segments, and every stop that
        starts strictly before ``row`` adds its duration. Time zero is the start of the audio, so row 0 is reached
        at ``-first_beat_offset_in_seconds``.

        :param row: The row to convert.
        :returns: The elapsed time in seconds.
        """
        seconds = -self.first_beat_offset_in_seconds
        current_row = 0
        current_bpm = DEFAULT_BPM
        for segment in self.sorted_bpm_segments():
            if segment.start_row_index >= row:
                break
            if segment.start_row_index > current_row:
                seconds += _row_span_to_seconds(segment.start_row_index - current_row, current_bpm)
                current_row = segment.start_row_index
            current_bpm = segment.beats_per_minute
        seconds += _row_span_to_seconds(row - current_row, current_bpm)

        for stop in self.stop_segments:
            if stop.start_row_index < row:
                seconds += stop.stop_time_in_seconds
        return seconds


def _row_span_to_seconds(rows: int, bpm: float) -> float:
    if bpm <= 0:
        return 0.0
    return rows_to_beats(rows) * 60.0 / bpm
