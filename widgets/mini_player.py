from __future__ import annotations

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static

from models.playback import PlayerSnapshot
from services.player_state import PlayerState
from widgets.scrub_bar import ScrubBar

PLAY_GLYPH = "▶"
PAUSE_GLYPH = "⏸"


class MiniPlayer(Vertical):
    """Compact player strip shown above the tabs while the player is collapsed."""

    can_focus = True

    BINDINGS = [
        ("enter", "expand", "Expand"),
    ]

    def __init__(self, player: PlayerState, **kwargs) -> None:
        super().__init__(**kwargs)
        self._player = player

    def compose(self) -> ComposeResult:
        with Horizontal(id="mini-row"):
            yield Static("♪", id="mini-art", classes="album-art")
            with Vertical(id="mini-info"):
                yield Static("", id="mini-title", classes="track-title")
                yield Static("", id="mini-artist", classes="track-metadata")
            yield Button(PLAY_GLYPH, id="mini-toggle", classes="transport")
        yield ScrubBar(self._player, id="mini-progress")

    def on_mount(self) -> None:
        self.refresh_from(self._player.snapshot())

    def refresh_from(self, snapshot: PlayerSnapshot) -> None:
        """Re-render from a published player snapshot."""
        self.query_one("#mini-title", Static).update(snapshot.track.title)
        self.query_one("#mini-artist", Static).update(snapshot.track.artist)
        self.query_one("#mini-toggle", Button).label = PAUSE_GLYPH if snapshot.is_playing else PLAY_GLYPH
        self.query_one("#mini-progress", ScrubBar).set_progress(snapshot.progress)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "mini-toggle":
            event.stop()
            self._player.toggle_play_pause()

    def on_click(self, event: events.Click) -> None:
        self._player.expand()

    def action_expand(self) -> None:
        self._player.expand()
