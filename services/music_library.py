import random
from typing import List, Optional, Sequence

from models.track import Track


MOCK_TRACKS = (
    Track(
        title="Feeling Lonely",
        artist="Soy Pablo",
        album_art="album1",
        duration=218,
        lyrics=(
            "I woke up this morning",
            "Feeling so alone",
            "In this empty room",
            "Waiting by the phone",
            "The silence is deafening",
            "My heart feels so cold",
            "These feelings I'm having",
            "Are getting too old",
        ),
    ),
    Track(
        title="Sick Feeling",
        artist="Soy Pablo",
        album_art="album2",
        duration=195,
        lyrics=(
            "There's something inside me",
            "That doesn't feel right",
            "This sick feeling growing",
            "Throughout the night",
            "I can't shake this mood",
            "It's taking control",
            "This darkness consuming",
            "My heart and my soul",
        ),
    ),
    Track(
        title="EvryTime",
        artist="Soy Pablo",
        album_art="album3",
        duration=167,
        lyrics=(
            "Every time I see you",
            "My heart skips a beat",
            "Every time you're near me",
            "I feel so complete",
            "Every time we talk",
            "I lose track of time",
            "Every time you smile",
            "I know you're mine",
        ),
    ),
    Track(
        title="Summer Nights",
        artist="Soy Pablo",
        album_art="album4",
        duration=201,
        lyrics=(
            "Summer nights are calling",
            "The warm breeze feels so right",
            "Dancing under starlight",
            "Everything's so bright",
            "These moments last forever",
            "In my memory they'll stay",
            "Summer nights together",
            "Take my breath away",
        ),
    ),
    Track(
        title="City Dreams",
        artist="Soy Pablo",
        album_art="album5",
        duration=189,
        lyrics=(
            "Walking through the city",
            "Neon lights so bright",
            "Chasing all my dreams",
            "Through the endless night",
            "Streets are full of stories",
            "People passing by",
            "City Dreams and hopes",
            "Reaching for the sky",
        ),
    ),
    Track(
        title="Midnight Drive",
        artist="Soy Pablo",
        album_art="album6",
        duration=233,
        lyrics=(
            "Driving through the midnight hour",
            "Radio playing soft and low",
            "City lights blur past my window",
            "Where this road leads, I don't know",
            "Freedom calls from every mile",
            "Stars above light up my way",
            "This midnight drive, this endless smile",
            "Could keep on going till the day",
        ),
    ),
)


class MusicLibrary:
    """In-memory track catalog backing the library, browse and profile tabs."""

    FEATURED_COUNT = 5

    def __init__(self, tracks: Optional[Sequence[Track]] = None):
        """Initialize MusicLibrary with an optional custom catalog.

        Args:
            tracks: Tracks to expose. Defaults to the built-in mock catalog.
        """
        self._tracks: List[Track] = list(MOCK_TRACKS if tracks is None else tracks)

    def get_tracks(self) -> List[Track]:
        """Return the catalog in display order."""
        return list(self._tracks)

    def get_track_by_index(self, index: int) -> Optional[Track]:
        """Retrieve specific track by index.

        Args:
            index: Index of track in track list.

        Returns:
            Track object if index is valid, None otherwise.
        """
        if 0 <= index < len(self._tracks):
            return self._tracks[index]
        return None

    def featured(self) -> List[Track]:
        return self._tracks[:self.FEATURED_COUNT]

    def recently_played(self, limit: int = 3) -> List[Track]:
        return self._tracks[:max(0, limit)]

    def artists(self) -> List[str]:
        """Return distinct artist names in catalog order."""
        return list(dict.fromkeys(track.artist for track in self._tracks))

    def total_duration(self) -> float:
        return sum(track.duration for track in self._tracks)

    def random_track(self) -> Optional[Track]:
        if not self._tracks:
            return None
        return random.choice(self._tracks)
