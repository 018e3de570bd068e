from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import Button, Label, Static

from services.music_library import MusicLibrary
from services.player_state import PlayerState
from views.browse import start_track

logger = logging.getLogger(__name__)


class ProfileView(Vertical):
    """Profile tab with listening stats and quick actions."""

    class ViewAllRequested(Message):
        """Posted when the user asks to see the full library."""

    def __init__(self, player: PlayerState, music_library: MusicLibrary, **kwargs) -> None:
        super().__init__(**kwargs)
        self._player = player
        self._music_library = music_library

    def compose(self) -> ComposeResult:
        yield Static("◉", id="profile-avatar")
        yield Label("Music Lover", id="profile-name")
        artists = self._music_library.artists()
        if artists:
            yield Label(f"Enjoying {artists[0]}'s latest tracks", id="profile-tagline")
        with Horizontal(id="profile-stats"):
            for value, caption in self.stats():
                with Vertical(classes="profile-stat"):
                    yield Label(value, classes="stat-value")
                    yield Label(caption, classes="stat-caption")
        yield Button("Shuffle All Songs", id="profile-shuffle", variant="primary")
        yield Button("View All Tracks", id="profile-view-all")

    def stats(self) -> list[tuple[str, str]]:
        """Return (value, caption) pairs for the stats row."""
        hours = self._music_library.total_duration() / 3600
        return [
            (str(len(self._music_library.get_tracks())), "Songs"),
            (f"{hours:.1f}", "Hours"),
            (str(len(self._music_library.artists())), "Artists"),
        ]

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "profile-shuffle":
            track = self._music_library.random_track()
            if track is None:
                self.notify("Library is empty", severity="warning")
                return
            logger.info(f"Shuffle picked '{track.title}'")
            start_track(self._player, track)
        elif event.button.id == "profile-view-all":
            self.post_message(self.ViewAllRequested())
