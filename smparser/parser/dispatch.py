"""
The table that routes each recognized tag marker to the code that handles it.
"""
import dataclasses

from abc import abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .base import DiagnosticSink
from .notes import MINIMUM_NOTES_VALUE_COUNT, parse_steps
from .tags import SongTag
from .timing import parse_bpm_segments, parse_offset, parse_stop_segments
from ..classes.base import AbstractDataclass
from ..classes.enums import SongDisplayBpmType, SongVisibilityType
from ..classes.song import Song
from ..classes.steps import Steps
from ..classes.timing import SongBpmSegment, SongStopSegment, SongTimingInfo
from ..registry import DEFAULT_REGISTRY, StepTypeRegistry
from ..utils import parse_compound_time, parse_float, parse_int

__all__ = [
    "ParseState",
    "TagHandler",
    "AssignText",
    "AssignFloat",
    "AssignFlag",
    "AssignTime",
    "ParseVisibility",
    "ParseDisplayBpm",
    "Delegate",
    "Ignore",
    "TAG_HANDLERS",
    "dispatch_tag",
]

RANDOM_DISPLAY_BPM = "*"
VISIBILITY_LITERALS = {
    "YES": SongVisibilityType.VISIBLE,
    "NO": SongVisibilityType.HIDDEN,
    "ROULETTE": SongVisibilityType.ROULETTE_ONLY,
}
TIME_SEPARATOR = ":"


@dataclass(eq=False)
class ParseState:
    """Everything one parse accumulates before the song is frozen."""

    sink: DiagnosticSink
    registry: StepTypeRegistry = DEFAULT_REGISTRY
    min_notes_values: int = MINIMUM_NOTES_VALUE_COUNT

    fields: dict[str, Any] = field(default_factory=dict)
    steps: list[Steps] = field(default_factory=list)
    bpm_segments: list[SongBpmSegment] = field(default_factory=list)
    stop_segments: list[SongStopSegment] = field(default_factory=list)
    first_beat_offset_in_seconds: float = 0.0
    stops_marker: str | None = None

    def build(self) -> Song:
        timing_info = SongTimingInfo(
            bpm_segments=tuple(self.bpm_segments),
            stop_segments=tuple(self.stop_segments),
            first_beat_offset_in_seconds=self.first_beat_offset_in_seconds,
        )
        return Song(**self.fields, steps=tuple(self.steps), timing_info=timing_info)


_SONG_FIELDS = {f.name for f in dataclasses.fields(Song)}


@dataclass
class TagHandler(AbstractDataclass):
    """An abstract base class for the action taken on one kind of tag."""

    @abstractmethod
    def apply(self, tag: SongTag, state: ParseState) -> None:
        """Handle ``tag``, recording its effect in ``state``."""
        pass


@dataclass
class _FieldHandler(TagHandler):
    song_field: str

    def __post_init__(self):
        if self.song_field not in _SONG_FIELDS:
            raise ValueError(f"song has no field named {self.song_field!r}")

    def first_value(self, tag: SongTag, state: ParseState) -> str | None:
        value = tag.value()
        if value is None:
            state.sink.warning("The {0} tag has no value, ignoring it.", tag.marker)
        return value


@dataclass
class AssignText(_FieldHandler):
    """Store the first value as is."""

    def apply(self, tag, state):
        value = self.first_value(tag, state)
        state.fields[self.song_field] = "" if value is None else value


@dataclass
class AssignFloat(_FieldHandler):
    """Store the first value as a decimal number."""

    def apply(self, tag, state):
        value = self.first_value(tag, state)
        if value is None:
            return
        try:
            state.fields[self.song_field] = parse_float(value)
        except ValueError:
            state.sink.warning('The {0} value of "{1}" is not a valid number, ignoring it.', tag.marker, value)


@dataclass
class AssignFlag(_FieldHandler):
    """Store the first value, an integer, as a boolean. Any non-zero value is true."""

    def apply(self, tag, state):
        value = self.first_value(tag, state)
        if value is None:
            return
        try:
            state.fields[self.song_field] = parse_int(value) != 0
        except ValueError:
            state.sink.warning('The {0} value of "{1}" is not a valid integer, ignoring it.', tag.marker, value)


@dataclass
class AssignTime(_FieldHandler):
    """
    Store a ``H:M:S`` time literal as seconds.

    The tokenizer splits on colons, so the components arrive as separate values and are joined back together.
    """

    def apply(self, tag, state):
        literal = TIME_SEPARATOR.join(tag.values)
        try:
            if not tag.values:
                raise ValueError("no value given")
            seconds = parse_compound_time(literal)
        except ValueError:
            state.sink.warning('The {0} time of "{1}" is not valid so setting it to 0 seconds.', tag.marker, literal)
            seconds = 0.0
        state.fields[self.song_field] = seconds


@dataclass
class ParseVisibility(TagHandler):
    """Set the visibility of the song from ``YES``, ``NO`` or ``ROULETTE``."""

    def apply(self, tag, state):
        value = tag.value()
        visibility = VISIBILITY_LITERALS.get(value) if value is not None else None
        if visibility is None:
            state.sink.warning('The {0} value of "{1}" is not recognized, ignoring it.', tag.marker, value)
            return
        state.fields["visibility"] = visibility


@dataclass
class ParseDisplayBpm(TagHandler):
    """
    Set how the song's BPM is displayed.

    ``*`` means a random display. Otherwise the first value is the minimum and the optional second value is the
    maximum; a single value is used for both. Nothing is changed if any value fails to parse.
    """

    def apply(self, tag, state):
        min_str = tag.value(0)
        if min_str is None:
            state.sink.warning("The {0} tag has no value, ignoring it.", tag.marker)
            return
        if min_str == RANDOM_DISPLAY_BPM:
            state.fields["display_bpm_type"] = SongDisplayBpmType.RANDOM
            return

        try:
            min_bpm = parse_float(min_str)
        except ValueError:
            state.sink.warning('The {0} minimum of "{1}" is not a valid number, ignoring the tag.', tag.marker, min_str)
            return

        max_bpm = min_bpm
        max_str = tag.value(1)
        if max_str is not None:
            try:
                max_bpm = parse_float(max_str)
            except ValueError:
                state.sink.warning(
                    'The {0} maximum of "{1}" is not a valid number, ignoring the tag.', tag.marker, max_str
                )
                return

        state.fields["display_bpm_type"] = SongDisplayBpmType.SPECIFIED
        state.fields["min_bpm"] = min_bpm
        state.fields["max_bpm"] = max_bpm


@dataclass
class Delegate(TagHandler):
    """Hand the tag to a sub-parser."""

    handler: Callable[[SongTag, ParseState], None]

    def apply(self, tag, state):
        self.handler(tag, state)


@dataclass
class Ignore(TagHandler):
    """Recognize the tag and do nothing with it."""

    def apply(self, tag, state):
        state.sink.verbose("Ignoring the {0} tag.", tag.marker)


def _read_offset(tag: SongTag, state: ParseState) -> None:
    state.first_beat_offset_in_seconds = parse_offset(tag, state.sink)


def _read_bpms(tag: SongTag, state: ParseState) -> None:
    state.bpm_segments.extend(parse_bpm_segments(tag, state.sink))


def _read_stops(tag: SongTag, state: ParseState) -> None:
    # STOPS and FREEZE are the same timeline under two names; STOPS wins when both are present.
    if state.stops_marker is not None:
        if tag.marker != "STOPS":
            state.sink.warning("Ignoring the {0} tag since {1} was already read.", tag.marker, state.stops_marker)
            return
        state.sink.warning("Replacing the {0} tag with the {1} tag.", state.stops_marker, tag.marker)
    state.stops_marker = tag.marker
    state.stop_segments[:] = parse_stop_segments(tag, state.sink)


def _read_notes(tag: SongTag, state: ParseState) -> None:
    steps = parse_steps(tag, state.sink, state.registry, state.min_notes_values)
    if steps is not None:
        state.steps.append(steps)


# fmt: off
TAG_HANDLERS: Mapping[str, TagHandler] = MappingProxyType({
    "TITLE"           : AssignText("title"),
    "SUBTITLE"        : AssignText("subtitle"),
    "ARTIST"          : AssignText("artist"),
    "TITLETRANSLIT"   : AssignText("title_translit"),
    "SUBTITLETRANSLIT": AssignText("subtitle_translit"),
    "ARTISTTRANSLIT"  : AssignText("artist_translit"),
    "GENRE"           : AssignText("genre"),
    "CREDIT"          : AssignText("credits"),
    "BANNER"          : AssignText("banner_path"),
    "BACKGROUND"      : AssignText("background_path"),
    "LYRICSPATH"      : AssignText("lyrics_path"),
    "CDTITLE"         : AssignText("cd_title"),
    "MUSIC"           : AssignText("music_path"),
    "MUSICLENGTH"     : AssignFloat("music_length_in_seconds"),
    "FIRSTBEAT"       : AssignFloat("first_beat_offset_in_seconds"),
    "LASTBEAT"        : AssignFloat("last_beat_offset_in_seconds"),
    "HASMUSIC"        : AssignFlag("has_music"),
    "HASBANNER"       : AssignFlag("has_banner"),
    "SAMPLESTART"     : AssignTime("sample_start_in_seconds"),
    "SAMPLELENGTH"    : AssignTime("sample_length_in_seconds"),
    "SELECTABLE"      : ParseVisibility(),
    "DISPLAYBPM"      : ParseDisplayBpm(),
    "OFFSET"          : Delegate(_read_offset),
    "BPMS"            : Delegate(_read_bpms),
    "STOPS"           : Delegate(_read_stops),
    "FREEZE"          : Delegate(_read_stops),
    "NOTES"           : Delegate(_read_notes),
    "NOTES2"          : Delegate(_read_notes),
    "MUSICBYTES"      : Ignore(),
})
# fmt: on


def dispatch_tag(tag: SongTag, state: ParseState, handlers: Mapping[str, TagHandler] = TAG_HANDLERS) -> None:
    """Route a tag to its handler. Unrecognized markers are reported and ignored."""
    handler = handlers.get(tag.marker)
    if handler is None:
        state.sink.warning('Unrecognized tag "{0}", ignoring it.', tag.marker)
        return
    handler.apply(tag, state)
