from .header import Header
from .help_screen import HelpScreen
from .mini_player import MiniPlayer
from .scrub_bar import ScrubBar, render_scrub_bar

__all__ = [
    "Header",
    "HelpScreen",
    "MiniPlayer",
    "ScrubBar",
    "render_scrub_bar",
]
