from __future__ import annotations

import pytest

from models.track import Track
from services.player_state import PlayerState


class FakeClock:
    """Clock double that only ticks when the test says so."""

    def __init__(self) -> None:
        self.on_tick = None
        self.starts = 0
        self.stops = 0

    @property
    def is_running(self) -> bool:
        return self.on_tick is not None

    def start(self, on_tick) -> None:
        self.stop()
        self.on_tick = on_tick
        self.starts += 1

    def stop(self) -> None:
        if self.on_tick is not None:
            self.stops += 1
        self.on_tick = None

    def tick(self, times: int = 1) -> None:
        for _ in range(times):
            if self.on_tick is None:
                return
            self.on_tick()


@pytest.fixture
def playlist() -> list[Track]:
    return [
        Track(title="Song 1", artist="Artist 1", album_art="album1", duration=120),
        Track(title="Song 2", artist="Artist 2", album_art="album2", duration=150),
        Track(title="Song 3", artist="Artist 3", album_art="album3", duration=180),
    ]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def player(playlist, clock):
    state = PlayerState(track=playlist[0], playlist=playlist, clock=clock)
    yield state
    state.close()
