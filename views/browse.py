from __future__ import annotations

import logging

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Label, ListItem, ListView, Static

from models.track import Track
from services.music_library import MusicLibrary
from services.player_state import PlayerState
from styles import COLOR_MUTED, COLOR_PRIMARY

logger = logging.getLogger(__name__)


def start_track(player: PlayerState, track: Track) -> None:
    """Select ``track`` and make sure playback is running."""
    player.select_track(track)
    if not player.is_playing:
        player.toggle_play_pause()


class BrowseView(VerticalScroll):
    """Browse tab with featured albums and recently played tracks."""

    def __init__(self, player: PlayerState, music_library: MusicLibrary, **kwargs) -> None:
        super().__init__(**kwargs)
        self._player = player
        self._music_library = music_library

    def compose(self) -> ComposeResult:
        yield Label("Featured Albums", classes="section-title")
        yield Static(self._render_featured(), id="browse-featured")
        yield Label("Recently Played", classes="section-title")
        yield ListView(
            *[self._recent_item(track) for track in self._music_library.recently_played()],
            id="browse-recent",
        )

    def _render_featured(self) -> Text:
        result = Text()
        for index, track in enumerate(self._music_library.featured()):
            result.append(f"▣ Album {index + 1}", style=f"{COLOR_PRIMARY} bold")
            result.append(f"  {track.artist}\n", style=COLOR_MUTED)
        return result

    @staticmethod
    def _recent_item(track: Track) -> ListItem:
        item = ListItem(Label(f"▶ {track.title} - {track.artist}"))
        item.track = track
        return item

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        track = getattr(event.item, "track", None)
        if track is None:
            return
        logger.debug(f"Playing recently played track '{track.title}'")
        start_track(self._player, track)
