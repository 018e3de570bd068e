import pytest

from textual.widgets import Button, ContentSwitcher, ListView

from main import NowPlayingApp
from models.track import ViewState
from services.music_library import MusicLibrary
from services.player_state import PlayerState
from views import NowPlayingView, ProfileView
from widgets import Header, HelpScreen, MiniPlayer, ScrubBar


def make_app(clock) -> NowPlayingApp:
    library = MusicLibrary()
    player = PlayerState(playlist=library.get_tracks(), clock=clock)
    return NowPlayingApp(music_library=library, player=player)


async def test_space_toggles_playback(clock):
    app = make_app(clock)
    async with app.run_test() as pilot:
        await pilot.press("space")
        assert app.player.is_playing
        assert app.query_one(Header).is_playing

        await pilot.press("space")
        assert not app.player.is_playing


async def test_next_and_previous_keys(clock):
    app = make_app(clock)
    async with app.run_test() as pilot:
        await pilot.press("n")
        assert app.player.current_track_index == 1
        await pilot.press("p", "p")
        assert app.player.current_track_index == app.player.playlist_count - 1


async def test_expand_and_collapse_swap_players(clock):
    app = make_app(clock)
    async with app.run_test() as pilot:
        await pilot.press("e")
        await pilot.pause()
        assert app.player.is_expanded
        assert app.query_one(NowPlayingView).display
        assert not app.query_one(MiniPlayer).display

        await pilot.press("escape")
        await pilot.pause()
        assert not app.player.is_expanded
        assert app.query_one(MiniPlayer).display


async def test_arrow_keys_seek(clock):
    app = make_app(clock)
    async with app.run_test() as pilot:
        await pilot.press("right", "right")
        assert app.player.current_time == 10
        await pilot.press("left")
        assert app.player.current_time == 5


async def test_number_keys_switch_tabs(clock):
    app = make_app(clock)
    async with app.run_test() as pilot:
        await pilot.press("2")
        assert app.query_one("#view-switcher", ContentSwitcher).current == ViewState.BROWSE.value
        assert app.query_one(Header).current_view is ViewState.BROWSE

        await pilot.press("3")
        assert app.query_one("#view-switcher", ContentSwitcher).current == ViewState.PROFILE.value


async def test_ticks_reach_the_mini_player(clock):
    app = make_app(clock)
    async with app.run_test() as pilot:
        await pilot.press("space")
        clock.tick(3)
        await pilot.pause()
        assert app.player.current_time == 3
        scrub_bar = app.query_one(MiniPlayer).query_one(ScrubBar)
        assert scrub_bar._progress == 3 / app.player.current_track.duration


async def test_help_opens_and_escape_closes_it(clock):
    app = make_app(clock)
    async with app.run_test() as pilot:
        await pilot.press("h")
        await pilot.pause()
        assert isinstance(app.screen, HelpScreen)

        await pilot.press("escape")
        await pilot.pause()
        assert not isinstance(app.screen, HelpScreen)


async def test_view_all_tracks_returns_to_library(clock):
    app = make_app(clock)
    async with app.run_test() as pilot:
        await pilot.press("3")
        app.query_one(ProfileView).post_message(ProfileView.ViewAllRequested())
        await pilot.pause()
        assert app.query_one("#view-switcher", ContentSwitcher).current == ViewState.LIBRARY.value


async def test_enter_on_focused_mini_player_expands(clock):
    app = make_app(clock)
    async with app.run_test() as pilot:
        app.query_one(MiniPlayer).focus()
        await pilot.pause()
        await pilot.press("enter")
        await pilot.pause()
        assert app.player.is_expanded


async def test_clicking_mini_player_expands(clock):
    app = make_app(clock)
    async with app.run_test() as pilot:
        await pilot.click("#mini-title")
        await pilot.pause()
        assert app.player.is_expanded
        assert app.query_one(NowPlayingView).display


async def test_mini_player_toggle_button_does_not_expand(clock):
    app = make_app(clock)
    async with app.run_test() as pilot:
        await pilot.click("#mini-toggle")
        await pilot.pause()
        assert app.player.is_playing
        assert not app.player.is_expanded


async def test_clicking_scrub_bar_seeks(clock):
    app = make_app(clock)
    async with app.run_test() as pilot:
        scrub_bar = app.query_one("#mini-progress", ScrubBar)
        width = scrub_bar.size.width
        x = width // 2
        await pilot.click("#mini-progress", offset=(x, 0))
        await pilot.pause()
        expected = x / width * app.player.current_track.duration
        assert app.player.current_time == pytest.approx(expected)
        assert not app.player.is_expanded


async def test_selecting_library_row_starts_playback(clock):
    app = make_app(clock)
    async with app.run_test() as pilot:
        app.query_one("#library-track-list", ListView).focus()
        await pilot.pause()
        await pilot.press("down", "enter")
        await pilot.pause()
        assert app.player.current_track_index == 1
        assert app.player.is_playing


async def test_library_cursor_follows_track_changes(clock):
    app = make_app(clock)
    async with app.run_test() as pilot:
        await pilot.press("n", "n")
        await pilot.pause()
        track_list = app.query_one("#library-track-list", ListView)
        assert track_list.index == app.player.current_track_index == 2


async def test_selecting_recently_played_starts_playback(clock):
    app = make_app(clock)
    async with app.run_test() as pilot:
        await pilot.press("2")
        await pilot.pause()
        app.query_one("#browse-recent", ListView).focus()
        await pilot.pause()
        await pilot.press("down", "enter")
        await pilot.pause()
        assert app.player.current_track == app.music_library.recently_played()[1]
        assert app.player.is_playing


async def test_shuffle_starts_playback(clock):
    app = make_app(clock)
    async with app.run_test() as pilot:
        await pilot.press("3")
        await pilot.pause()
        app.query_one("#profile-shuffle", Button).press()
        await pilot.pause()
        assert app.player.is_playing
        assert app.player.current_track in app.music_library.get_tracks()


async def test_shuffle_on_empty_library_warns(clock, monkeypatch):
    library = MusicLibrary(tracks=[])
    player = PlayerState(playlist=[], clock=clock)
    app = NowPlayingApp(music_library=library, player=player)
    async with app.run_test() as pilot:
        await pilot.press("3")
        await pilot.pause()
        view = app.query_one(ProfileView)
        notices = []
        monkeypatch.setattr(view, "notify", lambda message, **kwargs: notices.append((message, kwargs)))
        app.query_one("#profile-shuffle", Button).press()
        await pilot.pause()
        assert not app.player.is_playing
        assert notices == [("Library is empty", {"severity": "warning"})]
