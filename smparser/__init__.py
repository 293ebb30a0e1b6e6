"""
A fault-tolerant reader for SM/DWI family stepchart files.
"""
from .parser.base import Diagnostic, ParseResult
from .parser.sm import SMParser, parse_song
from .registry import DEFAULT_REGISTRY, StepTypeRegistry

__all__ = [
    "DEFAULT_REGISTRY",
    "Diagnostic",
    "ParseResult",
    "SMParser",
    "StepTypeRegistry",
    "parse_song",
]
