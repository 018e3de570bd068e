from textual.app import App, ComposeResult
from textual.widgets import Footer, ContentSwitcher
from textual.binding import Binding
import logging

import config
from models.playback import PlayerSnapshot
from models.track import ViewState
from widgets import Header, HelpScreen, MiniPlayer
from views import LibraryView, BrowseView, ProfileView, NowPlayingView
from services.music_library import MusicLibrary
from services.player_state import PlayerState

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Send log output to a file; the terminal belongs to the UI."""
    config.LOG_DIR.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(config.LOG_FILE)
        ]
    )


class NowPlayingApp(App):
    """A music player demo with a mini player and a full-screen player."""

    CSS_PATH = "styles/app.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit", priority=True),
        Binding("space", "play_pause", "Play/Pause", priority=True),
        Binding("n", "next_track", "Next", priority=True),
        Binding("p", "previous_track", "Prev", priority=True),
        Binding("left", "seek_backward", "Seek -", show=False, priority=True),
        Binding("right", "seek_forward", "Seek +", show=False, priority=True),
        Binding("e", "expand", "Expand", priority=True),
        Binding("escape", "collapse", "Collapse", priority=True),
        Binding("1", "show_tab('library')", "Library"),
        Binding("2", "show_tab('browse')", "Browse"),
        Binding("3", "show_tab('profile')", "Profile"),
        Binding("h", "show_help", "Help", priority=True),
        Binding("?", "show_help", "Help", show=False, priority=True),
    ]

    def __init__(self, music_library: MusicLibrary | None = None, player: PlayerState | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)

        logger.info("Starting NowPlaying application")

        self.music_library = music_library or MusicLibrary()
        self.player = player or PlayerState(playlist=self.music_library.get_tracks())
        logger.info(f"Loaded {self.player.playlist_count} tracks")

    def compose(self) -> ComposeResult:
        """Compose the tab shell with the player overlays."""
        yield Header()

        with ContentSwitcher(id="view-switcher", initial=ViewState.LIBRARY.value):
            yield LibraryView(self.player, id=ViewState.LIBRARY.value)
            yield BrowseView(self.player, self.music_library, id=ViewState.BROWSE.value)
            yield ProfileView(self.player, self.music_library, id=ViewState.PROFILE.value)

        yield MiniPlayer(self.player, id="mini-player")
        yield NowPlayingView(self.player, id="now-playing")

        yield Footer()

    def on_mount(self) -> None:
        self.player.subscribe(self._on_player_changed)
        self._on_player_changed(self.player.snapshot())

    def on_unmount(self) -> None:
        logger.info("Closing player session")
        self.player.close()

    def _on_player_changed(self, snapshot: PlayerSnapshot) -> None:
        """Re-render every player-bound widget from a new snapshot."""
        self.query_one(Header).is_playing = snapshot.is_playing

        self.query_one("#view-switcher", ContentSwitcher).display = not snapshot.is_expanded
        mini_player = self.query_one("#mini-player", MiniPlayer)
        mini_player.display = not snapshot.is_expanded
        now_playing = self.query_one("#now-playing", NowPlayingView)
        now_playing.display = snapshot.is_expanded

        mini_player.refresh_from(snapshot)
        now_playing.refresh_from(snapshot)
        self.query_one(LibraryView).refresh_from(snapshot)

    def action_quit(self) -> None:
        """Stop the player clock and exit."""
        self.player.close()
        self.exit()

    def action_play_pause(self) -> None:
        self.player.toggle_play_pause()

    def action_next_track(self) -> None:
        self.player.next_track()

    def action_previous_track(self) -> None:
        self.player.previous_track()

    def action_seek_forward(self) -> None:
        self.player.seek(self.player.current_time + config.SEEK_STEP)

    def action_seek_backward(self) -> None:
        self.player.seek(self.player.current_time - config.SEEK_STEP)

    def action_expand(self) -> None:
        self.player.expand()

    def action_collapse(self) -> None:
        if isinstance(self.screen, HelpScreen):
            self.screen.dismiss()
            return
        self.player.collapse()

    def action_show_tab(self, name: str) -> None:
        """Switch the visible tab."""
        try:
            view = ViewState(name)
            self.query_one("#view-switcher", ContentSwitcher).current = view.value
            self.query_one(Header).current_view = view
            if self.player.is_expanded:
                self.player.collapse()
        except Exception as e:
            logger.error(f"Error switching to tab {name!r}: {e}")
            self.notify(f"❌ Cannot open {name}", severity="error")

    def on_profile_view_view_all_requested(self, event: ProfileView.ViewAllRequested) -> None:
        self.action_show_tab(ViewState.LIBRARY.value)

    def action_show_help(self) -> None:
        """Show the key binding help screen."""
        if isinstance(self.screen, HelpScreen):
            return
        try:
            self.push_screen(HelpScreen())
        except Exception as e:
            logger.error(f"Error showing help screen: {e}")
            self.notify("❌ Cannot show help", severity="error")


def main():
    """Entry point for the NowPlaying application.

    Handles initialization errors and provides user-friendly error messages.
    """
    try:
        configure_logging()
    except OSError as e:
        print(f"\n❌ Cannot create log directory {config.LOG_DIR}: {e}\n")
        exit(1)

    try:
        logger.info("=" * 60)
        logger.info("NowPlaying starting up")
        logger.info("=" * 60)

        app = NowPlayingApp()
        app.run()

        logger.info("NowPlaying shut down cleanly")

    except KeyboardInterrupt:
        logger.info("NowPlaying interrupted by user")
        print("\n\nGoodbye! 👋\n")
        exit(0)
    except Exception as e:
        logger.critical(f"Unexpected fatal error: {type(e).__name__}: {e}", exc_info=True)
        print("\n❌ NowPlaying encountered an unexpected error\n")
        print(f"{type(e).__name__}: {e}\n")
        print(f"Check {config.LOG_FILE} for more details.\n")
        exit(1)


if __name__ == "__main__":
    main()
