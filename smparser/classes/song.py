"""
Classes that encapsulate song metadata.
"""
from dataclasses import dataclass, field

from .enums import SongDisplayBpmType, SongVisibilityType
from .steps import Steps
from .timing import SongTimingInfo

__all__ = [
    "Song",
]


@dataclass(frozen=True)
class Song:
    """A class that contains all song metadata, timing, and the charts of every difficulty."""

    # Display metadata
    title: str = ""
    subtitle: str = ""
    artist: str = ""
    title_translit: str = ""
    subtitle_translit: str = ""
    artist_translit: str = ""
    genre: str = ""
    credits: str = ""
    cd_title: str = ""

    # Asset paths, as written in the file
    banner_path: str = ""
    background_path: str = ""
    lyrics_path: str = ""
    music_path: str = ""
    file_name: str = ""

    # Music timing
    music_length_in_seconds: float = 0.0
    first_beat_offset_in_seconds: float = 0.0
    last_beat_offset_in_seconds: float = 0.0
    sample_start_in_seconds: float = 0.0
    sample_length_in_seconds: float = 0.0
    has_music: bool = False
    has_banner: bool = False

    # Song selection display
    display_bpm_type: SongDisplayBpmType = SongDisplayBpmType.NONE
    min_bpm: float = 0.0
    max_bpm: float = 0.0
    visibility: SongVisibilityType = SongVisibilityType.VISIBLE

    steps: tuple[Steps, ...] = field(default_factory=tuple)
    timing_info: SongTimingInfo = field(default_factory=SongTimingInfo)
