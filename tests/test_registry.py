import pytest

from smparser.classes.enums import StepsType
from smparser.parser.sm import SMParser
from smparser.registry import DEFAULT_REGISTRY, STEP_TYPE_TRACK_COUNTS, StepTypeRegistry

from conftest import notes_tag_text


def test_default_registry_follows_steps_type_order():
    assert len(DEFAULT_REGISTRY) == len(StepsType) == 28
    for ordinal, name in enumerate(DEFAULT_REGISTRY.names()):
        assert DEFAULT_REGISTRY.resolve(name) is StepsType(ordinal)
        assert str(StepsType(ordinal)).startswith(name)


@pytest.mark.parametrize(
    "steps_type, track_count",
    [
        (StepsType.DANCE_SINGLE, 4),
        (StepsType.DANCE_DOUBLE, 8),
        (StepsType.DANCE_SOLO, 6),
        (StepsType.PUMP_SINGLE, 5),
        (StepsType.PUMP_DOUBLE, 10),
        (StepsType.BM_DOUBLE7, 16),
        (StepsType.PNM_NINE, 9),
    ],
)
def test_track_counts(steps_type, track_count):
    assert DEFAULT_REGISTRY.track_count(steps_type) == track_count


def test_aliases_and_case_folding():
    assert DEFAULT_REGISTRY.canonical_name("PARA") == "para-single"
    assert DEFAULT_REGISTRY.canonical_name(" Ez2-Single-Hard ") == "ez2-single"
    assert "para" in DEFAULT_REGISTRY
    assert "kb7-single" not in DEFAULT_REGISTRY
    assert DEFAULT_REGISTRY.resolve("kb7-single") is None


def test_default_table_is_read_only():
    with pytest.raises(TypeError):
        STEP_TYPE_TRACK_COUNTS["kb7-single"] = 7


def test_substitute_registry_assigns_ordinals_by_position():
    registry = StepTypeRegistry({"pump-single": 5, "dance-single": 4})
    assert registry.resolve("pump-single") is StepsType(0)
    assert registry.resolve("dance-single") is StepsType(1)
    assert registry.track_count(StepsType(1)) == 4
    with pytest.raises(KeyError):
        registry.track_count(StepsType(2))


def test_parser_uses_substitute_registry():
    registry = StepTypeRegistry({"pump-single": 5})
    buffer = notes_tag_text(steps_type="dance-single", notes="00000\n")
    result = SMParser(registry=registry).parse(buffer)
    steps = result.song.steps[0]
    assert steps.type is StepsType(0)
    assert steps.note_data.track_count == 5
    assert len(result.warnings) == 1
    assert "pump-single" in result.warnings[0].message


def test_with_entries_keeps_applicable_aliases():
    registry = DEFAULT_REGISTRY.with_entries({"para-single": 5})
    assert registry.resolve("para") is StepsType(0)
    assert registry.canonical_name("ez2-single-hard") is None


@pytest.mark.parametrize(
    "entries, aliases",
    [
        ({}, None),
        ({"dance-single": 0}, None),
        ({f"mode-{i}": 4 for i in range(len(StepsType) + 1)}, None),
        ({"dance-single": 4}, {"para": "para-single"}),
    ],
)
def test_invalid_registries(entries, aliases):
    with pytest.raises(ValueError):
        StepTypeRegistry(entries, aliases)
