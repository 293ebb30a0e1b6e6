"""
Abstract base classes for parsers, and the result type they produce.
"""
import logging
import warnings

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..classes.base import ParserWarning, StrictModeError
from ..classes.enums import DiagnosticLevel
from ..classes.song import Song

__all__ = [
    "Diagnostic",
    "DiagnosticSink",
    "ParseResult",
    "Parser",
]


@dataclass(frozen=True)
class Diagnostic:
    """A single message emitted while parsing: a ``str.format`` template plus its positional arguments."""

    level: DiagnosticLevel
    template: str
    args: tuple[Any, ...] = ()

    @property
    def message(self) -> str:
        return self.template.format(*self.args)

    def __str__(self) -> str:
        return f"{self.level.name}: {self.message}"


class DiagnosticSink:
    """
    Collects diagnostics for one parse, forwarding each to a logger as it arrives.
    """

    def __init__(self, logger: logging.Logger):
        self._logger = logger
        self.diagnostics: list[Diagnostic] = []

    def emit(self, level: DiagnosticLevel, template: str, *args: Any) -> None:
        diagnostic = Diagnostic(level, template, args)
        self.diagnostics.append(diagnostic)
        if self._logger.isEnabledFor(level.value):
            self._logger.log(level.value, diagnostic.message)

    def verbose(self, template: str, *args: Any) -> None:
        self.emit(DiagnosticLevel.VERBOSE, template, *args)

    def info(self, template: str, *args: Any) -> None:
        self.emit(DiagnosticLevel.INFO, template, *args)

    def warning(self, template: str, *args: Any) -> None:
        self.emit(DiagnosticLevel.WARNING, template, *args)

    def error(self, template: str, *args: Any) -> None:
        self.emit(DiagnosticLevel.ERROR, template, *args)


@dataclass(frozen=True)
class ParseResult:
    """The song built by a parse, together with everything that was reported along the way."""

    song: Song
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)

    @property
    def warnings(self) -> list[Diagnostic]:
        """Diagnostics of warning level or worse."""
        return [d for d in self.diagnostics if d.level.value >= DiagnosticLevel.WARNING.value]

    @property
    def ok(self) -> bool:
        """Whether the parse finished without any warnings."""
        return not self.warnings

    def raise_for_warnings(self) -> Song:
        """
        Return the song, treating any warning as fatal.

        :raises StrictModeError: if any warning-level diagnostic was recorded.
        """
        problems = self.warnings
        if problems:
            raise StrictModeError(problems)
        return self.song

    def emit_warnings(self) -> None:
        """Re-issue every warning-level diagnostic through :mod:`warnings` as a :class:`ParserWarning`."""
        for diagnostic in self.warnings:
            warnings.warn(diagnostic.message, ParserWarning, stacklevel=2)


class Parser(ABC):
    """
    An abstract base class for parsers that read a specific format.
    """

    @abstractmethod
    def parse(self, buffer: str, file_name: str = "") -> ParseResult:
        """Parse the full text of a file, producing a song and its diagnostics."""
        pass

    def parse_file(self, path: str | Path) -> ParseResult:
        """
        Read a file and parse it.

        :param path: Path to the file to parse. The file is read as UTF-8; a leading byte order mark is dropped.
        """
        file_path = Path(path)
        with file_path.open("r", encoding="utf-8-sig") as f:
            buffer = f.read()
        return self.parse(buffer, file_name=file_path.name)
