from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum


DEFAULT_LYRICS = (
    "Lyrics loading...",
    "Please wait a moment",
    "Music is playing",
    "Enjoy the song",
)


@dataclass(frozen=True, eq=False)
class Track:
    """Represents a music track with metadata and lyric lines.

    Tracks compare and hash by ``id`` only, so two tracks carrying the same
    metadata are still distinct items in a playlist.
    """
    title: str
    artist: str
    album_art: str
    duration: float
    lyrics: tuple[str, ...] = ()
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"Track duration must be non-negative, got {self.duration}")
        lyrics = tuple(self.lyrics)
        object.__setattr__(self, "duration", float(self.duration))
        object.__setattr__(self, "lyrics", lyrics if lyrics else DEFAULT_LYRICS)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Track):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


EMPTY_TRACK = Track(title="Not Playing", artist="", album_art="", duration=0, id="empty")


class ViewState(Enum):
    """Enum for the tabs of the application shell."""
    LIBRARY = "library"
    BROWSE = "browse"
    PROFILE = "profile"


def format_time(seconds: float) -> str:
    """Format seconds as m:ss."""
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}:{secs:02d}"
