"""
General purpose enumerations.
"""
import logging

from enum import Enum, IntEnum, unique

__all__ = [
    "StepsType",
    "StepsDifficulty",
    "StepsRadarCategory",
    "SongDisplayBpmType",
    "SongVisibilityType",
    "NoteType",
    "DiagnosticLevel",
]


@unique
class StepsType(IntEnum):
    """
    Enumeration for the game mode layout of a chart.

    Member values are the ordinal positions of the step type names in the step type registry, so the order here
    must follow the registry order.
    """

    DANCE_SINGLE = 0
    DANCE_DOUBLE = 1
    DANCE_COUPLE = 2
    DANCE_SOLO = 3
    PUMP_SINGLE = 4
    PUMP_HALFDOUBLE = 5
    PUMP_DOUBLE = 6
    PUMP_COUPLE = 7
    EZ2_SINGLE = 8
    EZ2_DOUBLE = 9
    EZ2_REAL = 10
    PARA_SINGLE = 11
    PARA_VERSUS = 12
    DS3DDX_SINGLE = 13
    BM_SINGLE5 = 14
    BM_DOUBLE5 = 15
    BM_SINGLE7 = 16
    BM_DOUBLE7 = 17
    MANIAX_SINGLE = 18
    MANIAX_DOUBLE = 19
    TECHNO_SINGLE4 = 20
    TECHNO_SINGLE5 = 21
    TECHNO_SINGLE8 = 22
    TECHNO_DOUBLE4 = 23
    TECHNO_DOUBLE5 = 24
    PNM_FIVE = 25
    PNM_NINE = 26
    LIGHTS_CABINET = 27

    def __str__(self) -> str:
        return f"{self.name.lower().replace('_', '-', 1)} ({self.value})"


class StepsDifficulty(IntEnum):
    """Enumeration for the difficulty tier of a chart."""

    BEGINNER = 0
    EASY = 1
    MEDIUM = 2
    HARD = 3
    CHALLENGE = 4

    def __str__(self) -> str:
        return f"{self.name.capitalize()} ({self.value})"


class StepsRadarCategory(IntEnum):
    """Enumeration for the radar value slots, in the order they appear in a chart tag."""

    STREAM = 0
    VOLTAGE = 1
    AIR = 2
    FREEZE = 3
    CHAOS = 4
    TAPS_AND_HOLDS = 5
    JUMPS = 6
    HOLDS = 7
    MINES = 8
    HANDS = 9
    ROLLS = 10


class SongDisplayBpmType(Enum):
    """Enumeration for how the BPM of a song is displayed."""

    NONE = 0
    SPECIFIED = 1
    RANDOM = 2


class SongVisibilityType(Enum):
    """Enumeration for the visibility of a song on the selection screen."""

    VISIBLE = 0
    HIDDEN = 1
    ROULETTE_ONLY = 2


@unique
class NoteType(Enum):
    """Enumeration for the per-track symbols of the note grid."""

    EMPTY = "0"
    TAP = "1"
    HOLD_HEAD = "2"
    TAIL = "3"
    ROLL_HEAD = "4"
    MINE = "M"
    LIFT = "L"
    FAKE = "F"
    KEYSOUND = "K"
    ATTACK = "A"


class DiagnosticLevel(Enum):
    """Enumeration for diagnostic severities. Values are the matching :mod:`logging` levels."""

    VERBOSE = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
