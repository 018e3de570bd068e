from __future__ import annotations

import logging

from rich.text import Text
from textual import events
from textual.widgets import Static

from services.player_state import PlayerState
from styles import COLOR_INACTIVE, COLOR_PRIMARY

logger = logging.getLogger(__name__)


def render_scrub_bar(progress: float, width: int) -> Text:
    """Render a scrub bar with a handle at ``progress`` (0.0 to 1.0)."""
    result = Text()
    if width <= 0:
        return result

    progress = max(0.0, min(1.0, progress))
    handle = min(width - 1, int(progress * width))

    for i in range(width):
        if i == handle:
            result.append("●", style=f"{COLOR_PRIMARY} bold")
        elif i < handle:
            result.append("━", style=COLOR_PRIMARY)
        else:
            result.append("─", style=COLOR_INACTIVE)
    return result


class ScrubBar(Static):
    """Scrub bar bound to the player; clicking seeks to the clicked position."""

    def __init__(self, player: PlayerState, **kwargs) -> None:
        super().__init__("", **kwargs)
        self._player = player
        self._progress = 0.0

    def on_mount(self) -> None:
        self.set_progress(self._player.progress_percentage)

    def on_resize(self, event: events.Resize) -> None:
        self.update(render_scrub_bar(self._progress, event.size.width))

    def set_progress(self, progress: float) -> None:
        self._progress = progress
        self.update(render_scrub_bar(progress, self.size.width))

    def on_click(self, event: events.Click) -> None:
        event.stop()
        width = self.size.width
        if width <= 0:
            return
        fraction = max(0.0, min(1.0, event.x / width))
        target = fraction * self._player.current_track.duration
        logger.debug(f"Scrub to {fraction:.0%} ({target:.1f}s)")
        self._player.seek(target)
