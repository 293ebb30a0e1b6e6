"""
Reading ``NOTES``/``NOTES2`` chart tags into :class:`~smparser.classes.steps.Steps`.
"""
from .base import DiagnosticSink
from .tags import SongTag
from ..classes.enums import NoteType, StepsDifficulty, StepsType
from ..classes.steps import Steps, StepsNoteData, StepsRadarValues
from ..registry import StepTypeRegistry
from ..utils import parse_int

__all__ = [
    "MINIMUM_NOTES_VALUE_COUNT",
    "DIFFICULTY_LABELS",
    "CHALLENGE_DESCRIPTIONS",
    "parse_difficulty",
    "parse_note_data",
    "parse_steps",
]

MINIMUM_NOTES_VALUE_COUNT = 7
"""The minimum number of values a chart tag must have to be read."""

# Value positions in a chart tag
STEPS_TYPE_INDEX = 0
DESCRIPTION_INDEX = 1
DIFFICULTY_INDEX = 2
METER_INDEX = 3
RADAR_VALUES_INDEX = 4
NOTE_DATA_INDEX = 5

RADAR_SEPARATOR = ","
MEASURE_SEPARATOR = ","

# fmt: off
DIFFICULTY_LABELS: dict[str, StepsDifficulty] = {
    "beginner" : StepsDifficulty.BEGINNER,
    "easy"     : StepsDifficulty.EASY,
    "basic"    : StepsDifficulty.EASY,
    "light"    : StepsDifficulty.EASY,
    "medium"   : StepsDifficulty.MEDIUM,
    "another"  : StepsDifficulty.MEDIUM,
    "trick"    : StepsDifficulty.MEDIUM,
    "standard" : StepsDifficulty.MEDIUM,
    "normal"   : StepsDifficulty.MEDIUM,
    "difficult": StepsDifficulty.MEDIUM,
    "hard"     : StepsDifficulty.HARD,
    "ssr"      : StepsDifficulty.HARD,
    "maniac"   : StepsDifficulty.HARD,
    "heavy"    : StepsDifficulty.HARD,
    "crazy"    : StepsDifficulty.HARD,
    "challenge": StepsDifficulty.CHALLENGE,
    "smaniac"  : StepsDifficulty.CHALLENGE,
    "expert"   : StepsDifficulty.CHALLENGE,
    "oni"      : StepsDifficulty.CHALLENGE,
}
# fmt: on
"""Difficulty labels, lower-cased, mapped to the tier they stand for."""

CHALLENGE_DESCRIPTIONS = frozenset({"smaniac", "challenge"})
"""Descriptions that mark a chart as a challenge chart, whatever its difficulty label says."""

DEFAULT_DIFFICULTY = StepsDifficulty.EASY
NOTE_SYMBOLS = {note_type.value: note_type for note_type in NoteType}


def parse_difficulty(label: str, description: str, sink: DiagnosticSink) -> StepsDifficulty:
    """
    Map a difficulty label to a tier.

    Charts described as "smaniac" or "challenge" were challenge charts before that tier had its own label, so the
    description overrides the label for them.
    """
    difficulty = DIFFICULTY_LABELS.get(label.strip().lower())
    if difficulty is None:
        sink.warning('Unknown difficulty "{0}", defaulting to {1}.', label, DEFAULT_DIFFICULTY.name.lower())
        difficulty = DEFAULT_DIFFICULTY
    if description.strip().lower() in CHALLENGE_DESCRIPTIONS:
        difficulty = StepsDifficulty.CHALLENGE
    return difficulty


def _parse_steps_type(name: str, registry: StepTypeRegistry, sink: DiagnosticSink) -> StepsType:
    steps_type = registry.resolve(name)
    if steps_type is None:
        steps_type = StepsType(0)
        sink.warning('Unknown steps type "{0}", defaulting to "{1}".', name, registry.names()[0])
    return steps_type


def _parse_row(line: str, track_count: int, m_no: int, sink: DiagnosticSink) -> tuple[NoteType, ...]:
    row: list[NoteType] = []
    for symbol in line:
        note_type = NOTE_SYMBOLS.get(symbol.upper())
        if note_type is None:
            sink.warning('Unknown note symbol "{0}" in measure {1}, treating it as empty.', symbol, m_no)
            note_type = NoteType.EMPTY
        row.append(note_type)

    if len(row) != track_count:
        sink.warning(
            'Row "{0}" in measure {1} has {2} track(s) instead of {3}, resizing it.', line, m_no, len(row), track_count
        )
        row = row[:track_count] + [NoteType.EMPTY] * (track_count - len(row))
    return tuple(row)


def parse_note_data(text: str, track_count: int, sink: DiagnosticSink) -> StepsNoteData:
    """
    Read the note grid of a chart.

    Measures are separated by commas and rows by line breaks; each row has one symbol per track. Blank lines are
    ignored. An empty measure after the final comma is dropped.

    :param text: The raw note data.
    :param track_count: The number of tracks of the chart's step type.
    :param sink: Where malformed rows are reported.
    """
    if not text.strip():
        return StepsNoteData(track_count)

    raw_measures = text.split(MEASURE_SEPARATOR)
    if len(raw_measures) > 1 and not raw_measures[-1].strip():
        raw_measures.pop()

    measures = []
    for m_no, raw_measure in enumerate(raw_measures):
        lines = [line.strip() for line in raw_measure.splitlines()]
        measures.append(tuple(_parse_row(line, track_count, m_no, sink) for line in lines if line))
    return StepsNoteData(track_count, tuple(measures))


def parse_steps(
    tag: SongTag,
    sink: DiagnosticSink,
    registry: StepTypeRegistry,
    min_values: int = MINIMUM_NOTES_VALUE_COUNT,
) -> Steps | None:
    """
    Read a chart tag.

    Only a tag with too few values is rejected outright. Any other problem is reported and the affected field falls
    back to its default.

    :param tag: The ``NOTES``/``NOTES2`` tag.
    :param sink: Where problems are reported.
    :param registry: The step type registry used to resolve the chart type and its track count.
    :param min_values: The minimum number of values the tag needs.
    :returns: The chart, or `None` if the tag was rejected.
    """
    if len(tag.values) < min_values:
        sink.warning(
            "The {0} tag has {1} value(s) but needs at least {2}, ignoring it.", tag.marker, len(tag.values), min_values
        )
        return None

    steps_type = _parse_steps_type(tag.values[STEPS_TYPE_INDEX], registry, sink)
    description = tag.values[DESCRIPTION_INDEX]
    difficulty = parse_difficulty(tag.values[DIFFICULTY_INDEX], description, sink)

    meter = 0
    try:
        meter = parse_int(tag.values[METER_INDEX])
    except ValueError:
        sink.warning('The meter of "{0}" is not a valid integer, leaving it at 0.', tag.values[METER_INDEX])

    radar_values = None
    radar_text = tag.values[RADAR_VALUES_INDEX]
    try:
        radar_values = StepsRadarValues.from_values(radar_text.split(RADAR_SEPARATOR))
    except ValueError as e:
        sink.warning('The radar values "{0}" could not be read: {1}', radar_text, e)

    note_data = parse_note_data(tag.values[NOTE_DATA_INDEX], registry.track_count(steps_type), sink)

    return Steps(
        type=steps_type,
        difficulty=difficulty,
        description=description,
        meter_index_offset=meter,
        radar_values=radar_values,
        note_data=note_data,
    )
