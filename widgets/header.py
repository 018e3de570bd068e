from textual.widgets import Static
from textual.reactive import reactive
from textual.containers import Vertical
from textual.app import ComposeResult
from rich.text import Text

from models.track import ViewState
from styles import COLOR_ACCENT, COLOR_PRIMARY, COLOR_MUTED, COLOR_DIM

TAB_LABELS = {
    ViewState.LIBRARY: "1 Library",
    ViewState.BROWSE: "2 Browse",
    ViewState.PROFILE: "3 Profile",
}


class Header(Vertical):
    current_view: reactive[ViewState] = reactive(ViewState.LIBRARY)
    is_playing: reactive[bool] = reactive(False)

    def compose(self) -> ComposeResult:
        yield Static(Text("♫ NowPlaying", style=f"{COLOR_ACCENT} bold"), id="header-logo")
        yield Static(self._render_tabs(), id="header-tabs")

    def _render_tabs(self) -> Text:
        result = Text()

        for view, label in TAB_LABELS.items():
            if view == self.current_view:
                result.append(f" {label} ", style=f"{COLOR_PRIMARY} bold reverse")
            else:
                result.append(f" {label} ", style=COLOR_MUTED)
            result.append("  ")

        result.append("│  ", style=COLOR_DIM)
        if self.is_playing:
            result.append("▶ Playing", style=f"{COLOR_ACCENT} bold")
        else:
            result.append("■ Stopped", style=COLOR_DIM)

        return result

    def watch_current_view(self, new_value: ViewState) -> None:
        self._refresh_tabs()

    def watch_is_playing(self, new_value: bool) -> None:
        self._refresh_tabs()

    def _refresh_tabs(self) -> None:
        if not self.is_mounted:
            return
        self.query_one("#header-tabs", Static).update(self._render_tabs())
