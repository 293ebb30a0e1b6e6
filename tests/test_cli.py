import pytest

from inspect_song import main


@pytest.fixture
def sample_path(tmp_path, sample_sm):
    path = tmp_path / "example.sm"
    path.write_text(sample_sm, encoding="utf-8")
    return path


def test_porcelain_output(sample_path, capsys):
    assert main([str(sample_path), "--porcelain"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "1\t2\t1\t0"
    assert lines[1] == "DANCE_SINGLE\tHARD\t9\t2"


def test_human_output(sample_path, capsys):
    assert main([str(sample_path)]) == 0
    out = capsys.readouterr().out
    assert "Example Song" in out
    assert "dance-single (0)" in out
    assert "WARNINGS" not in out


def test_unsupported_extension(tmp_path, capsys):
    path = tmp_path / "example.txt"
    path.write_text("#TITLE:A;", encoding="utf-8")
    assert main([str(path)]) == 3
    assert "unable to parse file" in capsys.readouterr().out


def test_porcelain_keeps_going_after_a_failure(tmp_path, sample_path, capsys):
    missing = tmp_path / "missing.sm"
    assert main([str(missing), str(sample_path), "--porcelain"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "-1\t-1\t-1\t-1"
    assert lines[1] == "1\t2\t1\t0"


def test_strict_mode_fails_on_warnings(tmp_path, capsys):
    path = tmp_path / "dupes.sm"
    path.write_text("#TITLE:A;\n#TITLE:B;\n", encoding="utf-8")
    assert main([str(path), "--strict"]) == 3
    assert "duplicate" in capsys.readouterr().out
