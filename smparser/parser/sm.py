"""
The parser for SM/DWI family stepchart files.
"""
import dataclasses
import logging

from collections.abc import Mapping
from typing import Any

from .base import DiagnosticSink, ParseResult, Parser
from .cursor import Cursor
from .dispatch import TAG_HANDLERS, ParseState, TagHandler, dispatch_tag
from .notes import MINIMUM_NOTES_VALUE_COUNT
from .tags import CHART_MARKERS, read_tags
from ..classes.base import InvalidInputError
from ..registry import DEFAULT_REGISTRY, StepTypeRegistry

__all__ = [
    "SMParser",
    "parse_song",
]

logger = logging.getLogger(__name__)


@dataclasses.dataclass(eq=False)
class SMParser(Parser):
    """
    Reads the text of a chart file into a :class:`~smparser.classes.song.Song`.

    Content problems never stop a parse: the affected field, segment or tag is skipped or defaulted and a warning is
    recorded in the returned :class:`~smparser.parser.base.ParseResult`. A parser holds no state between parses and
    can be reused.
    """

    registry: StepTypeRegistry = DEFAULT_REGISTRY
    """Step type registry used to resolve chart types and track counts."""

    ignore_comments: bool = True
    """Whether ``//`` comments are skipped while reading tags."""

    min_notes_values: int = MINIMUM_NOTES_VALUE_COUNT
    """Minimum number of values a chart tag needs to be read."""

    strict: bool = False
    """Whether any warning makes :meth:`parse` raise :class:`~smparser.classes.base.StrictModeError`."""

    handlers: Mapping[str, TagHandler] = dataclasses.field(default_factory=lambda: TAG_HANDLERS, repr=False)
    """Marker to handler table."""

    def __post_init__(self):
        if self.min_notes_values < 1:
            raise ValueError(f"min_notes_values must be positive (got {self.min_notes_values})")

    def parse(self, buffer: str, file_name: str = "") -> ParseResult:
        """
        Parse the full text of a chart file.

        :param buffer: The file contents.
        :param file_name: Name of the file the contents came from, stored on the song.
        :raises InvalidInputError: if ``buffer`` is empty or whitespace only.
        :raises StrictModeError: in strict mode, if any warning was recorded.
        """
        if not isinstance(buffer, str) or not buffer.strip():
            raise InvalidInputError("buffer cannot be empty or whitespace only")

        sink = DiagnosticSink(logger)
        sink.info('Loading a song file from "{0}".', file_name or "<buffer>")
        sink.verbose("Loaded song file contents of:\n{0}", buffer)

        cursor = Cursor(buffer, ignore_comments=self.ignore_comments)
        tags = read_tags(cursor, sink, CHART_MARKERS)

        state = ParseState(sink, registry=self.registry, min_notes_values=self.min_notes_values)
        if file_name:
            state.fields["file_name"] = file_name
        for tag in tags:
            dispatch_tag(tag, state, self.handlers)
        song = state.build()

        warning_count = sum(1 for d in sink.diagnostics if d.level.value >= logging.WARNING)
        sink.info(
            'Loaded "{0}" with {1} chart(s), {2} BPM segment(s) and {3} stop(s); {4} warning(s).',
            song.title,
            len(song.steps),
            len(song.timing_info.bpm_segments),
            len(song.timing_info.stop_segments),
            warning_count,
        )

        result = ParseResult(song, tuple(sink.diagnostics))
        if self.strict:
            result.raise_for_warnings()
        return result


def parse_song(buffer: str, **options: Any) -> ParseResult:
    """
    Parse the text of a chart file with a one-off :class:`SMParser`.

    :param buffer: The file contents.
    :param options: Fields of :class:`SMParser`.
    """
    return SMParser(**options).parse(buffer)
