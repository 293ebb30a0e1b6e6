import pytest

from smparser.classes.timing import SongBpmSegment, SongStopSegment, SongTimingInfo
from smparser.parser.tags import SongTag
from smparser.parser.timing import parse_bpm_segments, parse_offset, parse_stop_segments


def _warnings(sink):
    return [d for d in sink.diagnostics if d.level.name == "WARNING"]


def test_offset(sink):
    assert parse_offset(SongTag("OFFSET", ["-0.040"]), sink) == pytest.approx(-0.04)
    assert not _warnings(sink)


@pytest.mark.parametrize("values", [["abc"], [""], []])
def test_bad_offset_defaults_to_zero(sink, values):
    assert parse_offset(SongTag("OFFSET", values), sink) == 0.0
    assert len(_warnings(sink)) == 1


def test_bpm_segments(sink):
    segments = parse_bpm_segments(SongTag("BPMS", ["0.000=120.000,\n4.000=180.000"]), sink)
    assert segments == [SongBpmSegment(0, 120.0), SongBpmSegment(192, 180.0)]
    assert not _warnings(sink)


def test_malformed_pairs_are_skipped_without_affecting_siblings(sink):
    segments = parse_bpm_segments(SongTag("BPMS", ["0=120,bad,4=abc,x=100,=90,2=,8=140"]), sink)
    assert segments == [SongBpmSegment(0, 120.0), SongBpmSegment(384, 140.0)]
    assert len(_warnings(sink)) == 5


def test_pair_with_two_assignments_is_skipped(sink):
    segments = parse_bpm_segments(SongTag("BPMS", ["0=120=3,1=60"]), sink)
    assert segments == [SongBpmSegment(48, 60.0)]
    assert len(_warnings(sink)) == 1


def test_segments_keep_file_order(sink):
    segments = parse_bpm_segments(SongTag("BPMS", ["4=180,0=120"]), sink)
    assert [s.start_row_index for s in segments] == [192, 0]


def test_empty_entries_are_ignored(sink):
    assert parse_stop_segments(SongTag("STOPS", [""]), sink) == []
    assert parse_stop_segments(SongTag("STOPS", ["1=0.5,,"]), sink) == [SongStopSegment(48, 0.5)]
    assert not _warnings(sink)


def test_tag_without_values_is_reported(sink):
    assert parse_bpm_segments(SongTag("BPMS", []), sink) == []
    assert parse_stop_segments(SongTag("STOPS", []), sink) == []
    assert len(_warnings(sink)) == 2


def test_stop_segments(sink):
    segments = parse_stop_segments(SongTag("FREEZE", ["2.000=0.500,1.000=0.250"]), sink)
    assert segments == [SongStopSegment(96, 0.5), SongStopSegment(48, 0.25)]


def test_timing_info_sorting_leaves_file_order_alone():
    info = SongTimingInfo(
        bpm_segments=(SongBpmSegment(192, 180.0), SongBpmSegment(0, 120.0)),
        stop_segments=(SongStopSegment(96, 0.5), SongStopSegment(48, 0.25)),
    )
    assert [s.start_row_index for s in info.sorted_bpm_segments()] == [0, 192]
    assert [s.start_row_index for s in info.sorted_stop_segments()] == [48, 96]
    assert [s.start_row_index for s in info.bpm_segments] == [192, 0]


def test_bpm_at_row():
    info = SongTimingInfo(bpm_segments=(SongBpmSegment(192, 180.0), SongBpmSegment(0, 120.0)))
    assert info.bpm_at_row(0) == 120.0
    assert info.bpm_at_row(191) == 120.0
    assert info.bpm_at_row(192) == 180.0
    assert SongTimingInfo().bpm_at_row(0) == 60.0


def test_seconds_at_row():
    info = SongTimingInfo(
        bpm_segments=(SongBpmSegment(0, 120.0), SongBpmSegment(192, 180.0)),
        stop_segments=(SongStopSegment(96, 0.5),),
        first_beat_offset_in_seconds=-0.04,
    )
    assert info.seconds_at_row(0) == pytest.approx(0.04)
    assert info.seconds_at_row(96) == pytest.approx(1.04)
    assert info.seconds_at_row(97) == pytest.approx(1.04 + 0.5 + 60 / 120 / 48)
    assert info.seconds_at_row(192) == pytest.approx(2.54)
    assert info.seconds_at_row(288) == pytest.approx(2.54 + 2 * 60 / 180)


def test_segment_rows_must_be_integers():
    with pytest.raises(ValueError):
        SongBpmSegment(1.5, 120.0)
    with pytest.raises(ValueError):
        SongStopSegment("0", 1.0)
