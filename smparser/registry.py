"""
The step type registry: the ordered table of known game mode layouts and their track counts.
"""
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from .classes.enums import StepsType

__all__ = [
    "STEP_TYPE_TRACK_COUNTS",
    "STEP_TYPE_ALIASES",
    "StepTypeRegistry",
    "DEFAULT_REGISTRY",
]

# fmt: off
STEP_TYPE_TRACK_COUNTS: Mapping[str, int] = MappingProxyType({
    "dance-single"   : 4,
    "dance-double"   : 8,
    "dance-couple"   : 8,
    "dance-solo"     : 6,
    "pump-single"    : 5,
    "pump-halfdouble": 6,
    "pump-double"    : 10,
    "pump-couple"    : 10,
    "ez2-single"     : 5,
    "ez2-double"     : 10,
    "ez2-real"       : 7,
    "para-single"    : 5,
    "para-versus"    : 10,
    "ds3ddx-single"  : 8,
    "bm-single5"     : 6,
    "bm-double5"     : 12,
    "bm-single7"     : 8,
    "bm-double7"     : 16,
    "maniax-single"  : 4,
    "maniax-double"  : 8,
    "techno-single4" : 4,
    "techno-single5" : 5,
    "techno-single8" : 8,
    "techno-double4" : 8,
    "techno-double5" : 10,
    "pnm-five"       : 5,
    "pnm-nine"       : 9,
    "lights-cabinet" : 6,
})
"""Known step type names, in :class:`~smparser.classes.enums.StepsType` order, mapped to their track counts."""
# fmt: on

STEP_TYPE_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "ez2-single-hard": "ez2-single",
        "para": "para-single",
    }
)
"""Legacy step type names and the names they were renamed to."""


class StepTypeRegistry:
    """
    A read-only, ordered table of step type names and track counts.

    The position of a name in the table is the :class:`~smparser.classes.enums.StepsType` it resolves to, so a
    registry can hold at most as many entries as there are step types.
    """

    __slots__ = ("_entries", "_ordinals", "_aliases")

    def __init__(self, entries: Mapping[str, int], aliases: Mapping[str, str] | None = None):
        """
        :param entries: Step type names mapped to track counts, in ordinal order. Names are matched lower-cased.
        :param aliases: Legacy names mapped to names in ``entries``.
        :raises ValueError: if the table is empty, too large, has a non-positive track count, or an alias points
            to an unknown name.
        """
        normalized = {name.lower(): track_count for name, track_count in entries.items()}
        if not normalized:
            raise ValueError("registry must contain at least one step type")
        if len(normalized) > len(StepsType):
            raise ValueError(f"registry cannot hold more than {len(StepsType)} step types (got {len(normalized)})")
        for name, track_count in normalized.items():
            if track_count <= 0:
                raise ValueError(f'track count for "{name}" must be positive (got {track_count})')

        alias_map = {alias.lower(): target.lower() for alias, target in (aliases or {}).items()}
        for alias, target in alias_map.items():
            if target not in normalized:
                raise ValueError(f'alias "{alias}" points to unknown step type "{target}"')

        self._entries: Mapping[str, int] = MappingProxyType(normalized)
        self._ordinals: Mapping[str, int] = MappingProxyType({name: i for i, name in enumerate(normalized)})
        self._aliases: Mapping[str, str] = MappingProxyType(alias_map)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._entries)!r})"

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.canonical_name(name) is not None

    def names(self) -> list[str]:
        """Return the registered names in ordinal order."""
        return list(self._entries)

    def canonical_name(self, name: str) -> str | None:
        """Return the registered name that ``name`` refers to, after case folding and alias resolution."""
        key = name.strip().lower()
        key = self._aliases.get(key, key)
        if key in self._entries:
            return key
        return None

    def resolve(self, name: str) -> StepsType | None:
        """
        Resolve a step type name.

        :param name: The name as written in a chart tag.
        :returns: The step type, or `None` if the name is unknown.
        """
        key = self.canonical_name(name)
        if key is None:
            return None
        return StepsType(self._ordinals[key])

    def track_count(self, steps_type: StepsType) -> int:
        """
        Return the track count of a step type.

        :raises KeyError: if the step type has no entry in this registry.
        """
        track_counts = list(self._entries.values())
        if not 0 <= steps_type < len(track_counts):
            raise KeyError(steps_type)
        return track_counts[steps_type]

    def with_entries(self, entries: Mapping[str, int], aliases: Mapping[str, str] | None = None) -> "StepTypeRegistry":
        """Build a separate registry, keeping this registry's aliases that still point somewhere valid."""
        if aliases is None:
            lowered = {name.lower() for name in entries}
            aliases = {alias: target for alias, target in self._aliases.items() if target in lowered}
        return type(self)(entries, aliases)


DEFAULT_REGISTRY = StepTypeRegistry(STEP_TYPE_TRACK_COUNTS, STEP_TYPE_ALIASES)
"""The registry of every known step type. Built once at import time and never modified."""
