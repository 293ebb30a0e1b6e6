"""
Classes that represent chart-related entities.
"""
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from .base import Validateable
from .enums import (
    NoteType,
    StepsDifficulty,
    StepsRadarCategory,
    StepsType,
)
from ..utils import BEATS_PER_MEASURE, ROWS_PER_BEAT, parse_float

__all__ = [
    "RADAR_VALUE_COUNT",
    "StepsRadarValues",
    "StepsNoteData",
    "Steps",
]

RADAR_VALUE_COUNT = len(StepsRadarCategory)
"""Number of comma-separated scalars in a radar value list."""

ROWS_PER_MEASURE = ROWS_PER_BEAT * BEATS_PER_MEASURE

NoteRow = tuple[NoteType, ...]
Measure = tuple[NoteRow, ...]


@dataclass(frozen=True)
class StepsRadarValues(Validateable):
    """An immutable class that holds the radar statistics of a chart."""

    stream: float = 0.0
    voltage: float = 0.0
    air: float = 0.0
    freeze: float = 0.0
    chaos: float = 0.0
    taps_and_holds_count: int = 0
    jumps_count: int = 0
    holds_count: int = 0
    mines_count: int = 0
    hands_count: int = 0
    rolls_count: int = 0

    def __post_init__(self):
        self.validate()

    def validate(self):
        for name in ["taps_and_holds_count", "jumps_count", "holds_count", "mines_count", "hands_count", "rolls_count"]:
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} cannot be negative (got {value})")

    @classmethod
    def from_values(cls, values: Sequence[str]) -> "StepsRadarValues":
        """
        Build radar values from their positional textual form.

        :param values: Exactly :data:`RADAR_VALUE_COUNT` scalars, ordered as in :class:`StepsRadarCategory`.
        :raises ValueError: if the number of values is wrong, or any value cannot be parsed.
        """
        if len(values) != RADAR_VALUE_COUNT:
            raise ValueError(f"expected {RADAR_VALUE_COUNT} radar values (got {len(values)})")
        magnitudes = [parse_float(v) for v in values[: StepsRadarCategory.TAPS_AND_HOLDS]]
        # Counts are written as "12.000000" by some editors.
        counts = [int(parse_float(v)) for v in values[StepsRadarCategory.TAPS_AND_HOLDS :]]
        return cls(*magnitudes, *counts)

    def __getitem__(self, category: StepsRadarCategory) -> float | int:
        return getattr(self, _RADAR_FIELDS[category])


_RADAR_FIELDS = {
    StepsRadarCategory.STREAM: "stream",
    StepsRadarCategory.VOLTAGE: "voltage",
    StepsRadarCategory.AIR: "air",
    StepsRadarCategory.FREEZE: "freeze",
    StepsRadarCategory.CHAOS: "chaos",
    StepsRadarCategory.TAPS_AND_HOLDS: "taps_and_holds_count",
    StepsRadarCategory.JUMPS: "jumps_count",
    StepsRadarCategory.HOLDS: "holds_count",
    StepsRadarCategory.MINES: "mines_count",
    StepsRadarCategory.HANDS: "hands_count",
    StepsRadarCategory.ROLLS: "rolls_count",
}


@dataclass(frozen=True)
class StepsNoteData(Validateable):
    """
    An immutable class that holds the note grid of a chart.

    A measure spans four beats; its rows are spread evenly across them. Every row has exactly ``track_count``
    symbols.
    """

    track_count: int
    measures: tuple[Measure, ...] = field(default_factory=tuple)

    def __post_init__(self):
        self.validate()

    def validate(self):
        if self.track_count <= 0:
            raise ValueError(f"track count must be positive (got {self.track_count})")
        for m_no, measure in enumerate(self.measures):
            for row in measure:
                if len(row) != self.track_count:
                    raise ValueError(f"row width in measure {m_no} does not match track count (got {len(row)})")

    @property
    def measure_count(self) -> int:
        return len(self.measures)

    @property
    def row_count(self) -> int:
        return sum(len(measure) for measure in self.measures)

    def iter_rows(self) -> Iterator[tuple[int, NoteRow]]:
        """
        Iterate over every row of the grid.

        :returns: An iterator of ``(row_index, row)`` pairs, where ``row_index`` is in rows of
            :data:`~smparser.utils.ROWS_PER_BEAT` per beat, rounded down for subdivisions that do not land on a row.
        """
        for m_no, measure in enumerate(self.measures):
            if not measure:
                continue
            for r_no, row in enumerate(measure):
                yield m_no * ROWS_PER_MEASURE + r_no * ROWS_PER_MEASURE // len(measure), row

    def count(self, note_type: NoteType) -> int:
        """Count the symbols of one type across the whole grid."""
        return sum(row.count(note_type) for measure in self.measures for row in measure)


@dataclass(frozen=True)
class Steps:
    """An immutable class that represents one playable chart of a song."""

    type: StepsType = StepsType.DANCE_SINGLE
    difficulty: StepsDifficulty = StepsDifficulty.EASY
    description: str = ""
    meter_index_offset: int = 0
    radar_values: StepsRadarValues | None = None
    note_data: StepsNoteData | None = None
