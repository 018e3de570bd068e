from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .track import Track, format_time


class PlaybackState(Enum):
    """Transport state of the simulated player."""
    STOPPED = "stopped"
    PLAYING = "playing"


@dataclass(frozen=True)
class PlayerSnapshot:
    """Published player state after a command or tick has settled."""
    track: Track
    track_index: int
    playlist_count: int
    current_time: float
    is_playing: bool
    is_expanded: bool
    current_lyric: str
    progress: float
    has_next_track: bool
    has_previous_track: bool

    @property
    def state(self) -> PlaybackState:
        return PlaybackState.PLAYING if self.is_playing else PlaybackState.STOPPED

    @property
    def time_label(self) -> str:
        return f"{format_time(self.current_time)} / {format_time(self.track.duration)}"
