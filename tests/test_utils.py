import pytest

from smparser.utils import (
    ROWS_PER_BEAT,
    beats_to_rows,
    convert_offset_to_row,
    parse_compound_time,
    parse_float,
    parse_int,
    rows_to_beats,
)


def test_rows_per_beat_divides_common_subdivisions():
    assert ROWS_PER_BEAT == 48
    for divisor in (2, 3, 4, 8, 12, 16):
        assert ROWS_PER_BEAT * 4 % divisor == 0


def test_convert_offset_to_row():
    assert convert_offset_to_row(0) == 0
    assert convert_offset_to_row(1.0) == 48
    assert convert_offset_to_row(0.5) == 24
    assert convert_offset_to_row(4.0) == 192
    assert convert_offset_to_row(-0.04) == -2


def test_convert_offset_to_row_is_monotonic():
    rows = [convert_offset_to_row(i / 1000) for i in range(5000)]
    assert all(a <= b for a, b in zip(rows, rows[1:]))


def test_convert_offset_to_row_rounds_half_to_even():
    assert convert_offset_to_row(0.5 / 48) == 0
    assert convert_offset_to_row(1.5 / 48) == 2


def test_rows_and_beats():
    assert rows_to_beats(96) == 2.0
    assert beats_to_rows(1.5) == 72
    assert beats_to_rows(rows_to_beats(37)) == 37


@pytest.mark.parametrize(
    "literal, seconds",
    [
        ("1:02.5", 62.5),
        ("2.5", 2.5),
        ("1:00:00", 3600.0),
        ("0:0:1.25", 1.25),
    ],
)
def test_parse_compound_time(literal, seconds):
    assert parse_compound_time(literal) == pytest.approx(seconds)


@pytest.mark.parametrize("literal", ["", "1:x", "a:1:2", "1.5:2", "1:2:3:4"])
def test_parse_compound_time_rejects_bad_literals(literal):
    with pytest.raises(ValueError):
        parse_compound_time(literal)


def test_parse_float():
    assert parse_float(" 1.5 ") == 1.5
    assert parse_float("-0.040") == -0.04
    for bad in ["", "abc", "nan", "inf", "1_0"]:
        with pytest.raises(ValueError):
            parse_float(bad)


def test_parse_int():
    assert parse_int(" 12 ") == 12
    for bad in ["", "1.5", "x"]:
        with pytest.raises(ValueError):
            parse_int(bad)
