"""
A bounds-checked character scanner over an immutable text buffer.
"""
from collections.abc import Container

from ..classes.base import CursorOutOfRangeError, InvalidInputError

__all__ = [
    "COMMENT_MARKER",
    "Cursor",
]

COMMENT_MARKER = "//"
"""Two-character sequence that starts a comment running to the end of the line."""


class Cursor:
    """
    A bidirectional scanner over a text buffer.

    The offset always stays within ``[0, len(buffer)]``; any operation that would move or look outside of that range
    raises :class:`CursorOutOfRangeError` instead of clamping. A cursor is not safe to share between threads.
    """

    __slots__ = ("_buffer", "_offset", "ignore_comments")

    def __init__(self, buffer: str, ignore_comments: bool = True):
        """
        :param buffer: The text to scan.
        :param ignore_comments: Whether :meth:`read_until` skips ``//`` comments.
        :raises InvalidInputError: if ``buffer`` is not a string, or is empty or whitespace only.
        """
        if not isinstance(buffer, str) or not buffer.strip():
            raise InvalidInputError("buffer cannot be empty or whitespace only")
        self._buffer = buffer
        self._offset = 0
        self.ignore_comments = ignore_comments

    def __repr__(self) -> str:
        return f"{type(self).__name__}(offset={self._offset}, length={len(self._buffer)})"

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def length(self) -> int:
        return len(self._buffer)

    @property
    def is_at_end(self) -> bool:
        return self._offset == len(self._buffer)

    def is_offset_valid(self, k: int = 0) -> bool:
        """Whether a character exists at ``offset + k``."""
        return 0 <= self._offset + k < len(self._buffer)

    def peek(self, k: int = 0) -> str:
        """
        Return the character at ``offset + k`` without moving.

        :raises CursorOutOfRangeError: if there is no character there.
        """
        if not self.is_offset_valid(k):
            raise CursorOutOfRangeError(f"cannot peek at offset {self._offset + k} (length {len(self._buffer)})")
        return self._buffer[self._offset + k]

    def read_char(self) -> str:
        """
        Return the character at the current offset and advance past it.

        :raises CursorOutOfRangeError: if the cursor is at the end of the buffer.
        """
        c = self.peek()
        self._offset += 1
        return c

    def skip(self, n: int) -> None:
        """
        Move the offset by ``n`` characters. Negative values move backwards.

        :raises CursorOutOfRangeError: if the new offset would fall outside ``[0, length]``. The offset is left
            untouched in that case.
        """
        target = self._offset + n
        if not 0 <= target <= len(self._buffer):
            raise CursorOutOfRangeError(f"cannot move to offset {target} (length {len(self._buffer)})")
        self._offset = target

    def read_until(self, *stop_chars: str) -> str:
        """
        Read characters until the next one is a stop character, or the end of the buffer is reached.

        The stop character itself is not consumed. When comments are ignored, a ``//`` sequence and everything after
        it up to and including the next newline is skipped and reading carries on after it.

        :param stop_chars: Characters that halt reading.
        :returns: Every character read, not including skipped comments.
        """
        stops: Container[str] = frozenset(stop_chars)
        chars: list[str] = []
        buffer = self._buffer
        length = len(buffer)
        while self._offset < length:
            c = buffer[self._offset]
            if self.ignore_comments and buffer.startswith(COMMENT_MARKER, self._offset):
                newline = buffer.find("\n", self._offset)
                self._offset = length if newline == -1 else newline + 1
                continue
            if c in stops:
                break
            chars.append(c)
            self._offset += 1
        return "".join(chars)
