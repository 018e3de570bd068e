from .music_library import MusicLibrary
from .playback_clock import PlaybackClock
from .player_state import PlayerState

__all__ = [
    'MusicLibrary',
    'PlaybackClock',
    'PlayerState',
]
