import logging

from textual.app import ComposeResult
from textual.widgets import ListView, ListItem, Label
from textual.containers import Container

from models.playback import PlayerSnapshot
from models.track import Track, format_time
from services.player_state import PlayerState
from views.browse import start_track

logger = logging.getLogger(__name__)


class LibraryView(Container):
    """Library tab listing the playlist with vim navigation."""

    BINDINGS = [
        ("j", "move_down", "Move down"),
        ("k", "move_up", "Move up"),
    ]

    def __init__(self, player: PlayerState, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._player = player
        self._marked_index = None

    def compose(self) -> ComposeResult:
        yield Label("🎵 Library", id="library-title")
        yield ListView(id="library-track-list")

    def on_mount(self) -> None:
        self._populate_list()

    def _populate_list(self) -> None:
        track_list = self.query_one("#library-track-list", ListView)
        track_list.clear()

        if not self._player.playlist:
            track_list.append(ListItem(Label("No tracks available")))
            return

        current = self._player.current_track
        for track in self._player.playlist:
            item = ListItem(Label(self._row_text(track, track == current, self._player.is_playing)))
            item.track = track
            track_list.append(item)

        track_list.index = self._player.current_track_index
        self._marked_index = self._player.current_track_index

    @staticmethod
    def _row_text(track: Track, is_current: bool, is_playing: bool = False) -> str:
        if is_current:
            prefix = "▶ " if is_playing else "♪ "
        else:
            prefix = "  "
        return f"{prefix}{track.title} - {track.artist} [{format_time(track.duration)}]"

    def refresh_from(self, snapshot: PlayerSnapshot) -> None:
        """Move the current-track marker and cursor to the playing row."""
        track_list = self.query_one("#library-track-list", ListView)
        for item in track_list.children:
            track = getattr(item, "track", None)
            if track is None:
                continue
            try:
                label = item.query_one(Label)
            except Exception as e:
                logger.debug(f"Could not query label from list item: {e}")
                continue
            label.update(self._row_text(track, track == snapshot.track, snapshot.is_playing))

        # Only follow track changes so ticks leave the user's cursor alone
        if snapshot.playlist_count and snapshot.track_index != self._marked_index:
            self._marked_index = snapshot.track_index
            track_list.index = snapshot.track_index

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        track = getattr(event.item, "track", None)
        if track is not None:
            start_track(self._player, track)

    def action_move_down(self) -> None:
        """Move selection down in the list (j key)."""
        self.query_one("#library-track-list", ListView).action_cursor_down()

    def action_move_up(self) -> None:
        """Move selection up in the list (k key)."""
        self.query_one("#library-track-list", ListView).action_cursor_up()
