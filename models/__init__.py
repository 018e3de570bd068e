from .track import Track, ViewState, DEFAULT_LYRICS, EMPTY_TRACK, format_time
from .playback import PlaybackState, PlayerSnapshot
from .lyrics import LyricSegment

__all__ = [
    "Track",
    "ViewState",
    "DEFAULT_LYRICS",
    "EMPTY_TRACK",
    "format_time",
    "PlaybackState",
    "PlayerSnapshot",
    "LyricSegment",
]
