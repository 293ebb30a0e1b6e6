from .base import (
    CursorOutOfRangeError,
    InvalidInputError,
    ParserWarning,
    StrictModeError,
)

from .enums import (
    DiagnosticLevel,
    NoteType,
    SongDisplayBpmType,
    SongVisibilityType,
    StepsDifficulty,
    StepsRadarCategory,
    StepsType,
)

from .song import (
    Song
)

from .steps import (
    Steps,
    StepsNoteData,
    StepsRadarValues,
)

from .timing import (
    SongBpmSegment,
    SongStopSegment,
    SongTimingInfo,
)
