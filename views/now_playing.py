from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Button, Static
from rich.text import Text

from models.lyrics import bucket_segments, lyric_index_at
from models.playback import PlayerSnapshot
from models.track import Track, format_time
from services.player_state import PlayerState
from styles import COLOR_ACCENT, COLOR_DIM, COLOR_MUTED, COLOR_PRIMARY
from widgets.scrub_bar import ScrubBar

ART_SIZE = 7


def render_album_art(track: Track) -> Text:
    """Render the album-art placeholder block for a track."""
    result = Text()
    inner = ART_SIZE * 2
    label = (track.album_art or "♪")[:inner].center(inner)
    for row in range(ART_SIZE):
        text = label if row == ART_SIZE // 2 else " " * inner
        result.append(text, style=f"{COLOR_PRIMARY} on {COLOR_ACCENT}")
        if row < ART_SIZE - 1:
            result.append("\n")
    return result


def render_lyric_sheet(track: Track, current_time: float) -> Text:
    """Render all lyric lines with the active one highlighted."""
    segments = bucket_segments(track.lyrics)
    active = lyric_index_at(current_time, len(segments))
    result = Text()
    for i, segment in enumerate(segments):
        if i == active:
            result.append(f"▸ {segment.text}\n", style=f"{COLOR_PRIMARY} bold")
        else:
            result.append(f"  {segment.text}\n", style=COLOR_DIM)
    return result


class NowPlayingView(Container):
    """Full-screen player shown while the player is expanded."""

    def __init__(self, player: PlayerState, **kwargs):
        """Initialize NowPlayingView with a player reference."""
        super().__init__(**kwargs)
        self._player = player

    def compose(self) -> ComposeResult:
        with Horizontal(id="np-topbar"):
            yield Button("⌄", id="np-collapse")
            yield Static("Now playing", id="np-heading")
        with Vertical(id="np-body"):
            yield Static("", id="np-art")
            yield Static("", id="np-title", classes="track-title")
            yield Static("", id="np-artist", classes="track-metadata")
            yield ScrubBar(self._player, id="np-progress")
            with Horizontal(id="np-times"):
                yield Static("0:00", id="np-elapsed")
                yield Static("0:00", id="np-duration")
            with Horizontal(id="np-controls"):
                yield Button("⏮", id="np-previous", classes="transport")
                yield Button("▶", id="np-toggle", classes="transport")
                yield Button("⏭", id="np-next", classes="transport")
            yield Static("Lyrics", id="np-lyrics-title")
            yield Static("", id="np-lyrics")

    def on_mount(self) -> None:
        self.refresh_from(self._player.snapshot())

    def refresh_from(self, snapshot: PlayerSnapshot) -> None:
        """Update all display widgets from a player snapshot."""
        track = snapshot.track
        self.query_one("#np-art", Static).update(render_album_art(track))
        self.query_one("#np-title", Static).update(track.title)
        self.query_one("#np-artist", Static).update(Text(track.artist, style=COLOR_MUTED))
        self.query_one("#np-progress", ScrubBar).set_progress(snapshot.progress)
        self.query_one("#np-elapsed", Static).update(format_time(snapshot.current_time))
        self.query_one("#np-duration", Static).update(format_time(track.duration))
        self.query_one("#np-toggle", Button).label = "⏸" if snapshot.is_playing else "▶"
        self.query_one("#np-previous", Button).disabled = not snapshot.has_previous_track
        self.query_one("#np-next", Button).disabled = not snapshot.has_next_track
        self.query_one("#np-lyrics", Static).update(render_lyric_sheet(track, snapshot.current_time))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "np-collapse":
            self._player.collapse()
        elif button_id == "np-previous":
            self._player.previous_track()
        elif button_id == "np-toggle":
            self._player.toggle_play_pause()
        elif button_id == "np-next":
            self._player.next_track()
        else:
            return
        event.stop()
