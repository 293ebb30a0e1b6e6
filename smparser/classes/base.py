"""
Base, generic classes supporting other more specialized classes.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass

__all__ = [
    "AbstractDataclass",
    "Validateable",
    "ParserWarning",
    "InvalidInputError",
    "CursorOutOfRangeError",
    "StrictModeError",
]


@dataclass
class AbstractDataclass(ABC):
    """An abstract base class for dataclasses."""

    def __new__(cls, *args, **kwargs):
        if cls == AbstractDataclass or cls.__bases__[0] == AbstractDataclass:
            raise TypeError("Cannot instantiate abstract class.")
        return super().__new__(cls)


class Validateable(ABC):
    """An abstract base class for classes that require validation."""

    @abstractmethod
    def validate(self):
        """
        Perform validation on the object.

        :raises ValueError: if any of the input is invalid.
        """
        pass


class ParserWarning(Warning):
    """Warning class for parser-related issues."""

    pass


class InvalidInputError(ValueError):
    """Raised when the parser is handed a buffer it cannot work with at all."""

    pass


class CursorOutOfRangeError(IndexError):
    """Raised when a cursor operation addresses an offset outside of its buffer."""

    pass


class StrictModeError(ValueError):
    """Raised in strict mode when a parse produced any warnings."""

    def __init__(self, diagnostics):
        self.diagnostics = list(diagnostics)
        super().__init__(f"parse produced {len(self.diagnostics)} warning(s)")
