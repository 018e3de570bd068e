from .library import LibraryView
from .browse import BrowseView
from .profile import ProfileView
from .now_playing import NowPlayingView

__all__ = ["LibraryView", "BrowseView", "ProfileView", "NowPlayingView"]
