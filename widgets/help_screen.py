from __future__ import annotations

from textual.screen import ModalScreen
from textual.widgets import Static, Button
from textual.containers import Container, VerticalScroll
from textual.app import ComposeResult

HELP_TEXT = """[bold #3b82f6]♫ NowPlaying - Music Player Demo[/bold #3b82f6]

[bold]TABS[/bold]
  1           Library (all tracks)
  2           Browse (featured and recently played)
  3           Profile (stats and shuffle)

[bold]PLAYBACK CONTROLS[/bold]
  Space       Play/Pause current track
  n           Next track (wraps to first)
  p           Previous track (wraps to last)
  ←/→         Seek backward/forward

[bold]PLAYER[/bold]
  e           Expand to full-screen player
  Enter       Expand when the mini player has focus
  Esc         Collapse back to mini player
  Click bar   Seek to position
  h/?         Show this help
  q           Quit application

[bold]NOTES[/bold]
  • Playback is simulated, one second per tick
  • ♪ marks the current track, ▶ while it plays
  • Lyrics advance one line every 30 seconds"""


class HelpScreen(ModalScreen[None]):
    """Modal screen displaying key bindings."""

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    #help-container {
        width: 70;
        height: 80%;
        background: #1c1c1e;
        border: thick #3b82f6;
        padding: 1 2;
    }

    #help-scroll {
        width: 100%;
        height: 1fr;
        margin-bottom: 1;
    }

    #help-close-button {
        width: 100%;
    }
    """

    def compose(self) -> ComposeResult:
        with Container(id="help-container"):
            with VerticalScroll(id="help-scroll"):
                yield Static(HELP_TEXT, id="help-content")
            yield Button("Close (Esc)", id="help-close-button", variant="primary")

    def on_mount(self) -> None:
        """Focus the close button when the screen mounts."""
        self.query_one("#help-close-button", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "help-close-button":
            self.dismiss()
