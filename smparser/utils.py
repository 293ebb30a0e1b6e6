"""
Classes and functions that provide general utility.
"""
__all__ = [
    "ROWS_PER_BEAT",
    "BEATS_PER_MEASURE",
    "convert_offset_to_row",
    "rows_to_beats",
    "beats_to_rows",
    "parse_float",
    "parse_int",
    "parse_compound_time",
]

ROWS_PER_BEAT = 48
"""
Number of rows in a single beat.

The smallest number that is evenly divisible by 2, 3 and 4, so 8th, 12th and 16th notes all land on whole rows.
"""

BEATS_PER_MEASURE = 4
"""Number of beats in a single measure of note data."""


def convert_offset_to_row(offset: float) -> int:
    """
    Convert a time-like offset to a row index.

    The offset is multiplied by :data:`ROWS_PER_BEAT` as is. Timing tags feed offsets in seconds through here, which
    only lines up with beats at 60 BPM; converting seconds to beats first would need the tempo governing the offset.

    Rounding is round-half-to-even, as done by :func:`round`.

    :param offset: The offset to convert.
    :returns: The index of the row that this offset aligns with.
    """
    return round(offset * ROWS_PER_BEAT)


def rows_to_beats(rows: int) -> float:
    """Convert a row count to a beat count."""
    return rows / ROWS_PER_BEAT


def beats_to_rows(beats: float) -> int:
    """Convert a beat count to the nearest row count."""
    return round(beats * ROWS_PER_BEAT)


def parse_float(s: str) -> float:
    """
    Parse a decimal number the way chart files write them.

    :raises ValueError: if the string is not a finite decimal number.
    """
    text = s.strip()
    if not text or "_" in text:
        raise ValueError(f"invalid number (got {s!r})")
    value = float(text)
    if value != value or value in (float("inf"), float("-inf")):
        raise ValueError(f"number must be finite (got {s!r})")
    return value


def parse_int(s: str) -> int:
    """
    Parse an integer the way chart files write them.

    :raises ValueError: if the string is not an integer.
    """
    text = s.strip()
    if not text or "_" in text:
        raise ValueError(f"invalid integer (got {s!r})")
    return int(text)


def parse_compound_time(s: str) -> float:
    """
    Parse a ``H:M:S`` time literal into seconds.

    Shorter literals are padded with zero components on the left, so ``"1:02.5"`` is 62.5 seconds and ``"2.5"`` is
    2.5 seconds. Hours and minutes must be integers; seconds may be fractional.

    :raises ValueError: if any component cannot be parsed, or if there are more than three components.
    """
    parts = s.split(":")
    if len(parts) > 3:
        raise ValueError(f"too many time components (got {s!r})")
    hours_str, minutes_str, seconds_str = ["0"] * (3 - len(parts)) + parts
    hours = parse_int(hours_str)
    minutes = parse_int(minutes_str)
    seconds = parse_float(seconds_str)
    return hours * 3600 + minutes * 60 + seconds
