from __future__ import annotations

import logging
from typing import Callable, Sequence

from models.lyrics import lyric_at
from models.playback import PlaybackState, PlayerSnapshot
from models.track import EMPTY_TRACK, Track, format_time
from services.music_library import MusicLibrary
from services.playback_clock import PlaybackClock

logger = logging.getLogger(__name__)

Listener = Callable[[PlayerSnapshot], None]


class PlayerState:
    """Playback and navigation state for a single listening session.

    Owns the simulated transport clock, the position in a read-only playlist,
    the lyric line for the current time and the expanded/collapsed flag of
    the player UI. State changes only through the command methods; every
    change is published to subscribers as a ``PlayerSnapshot``.
    """

    def __init__(
        self,
        track: Track | None = None,
        playlist: Sequence[Track] | None = None,
        clock: PlaybackClock | None = None,
    ) -> None:
        if playlist is None:
            playlist = MusicLibrary().get_tracks()
        self._playlist: tuple[Track, ...] = tuple(playlist)
        self._clock = clock if clock is not None else PlaybackClock()
        self._listeners: list[Listener] = []
        self._closed = False

        self._current_track_index = 0
        if track is None:
            self._current_track = self._playlist[0] if self._playlist else EMPTY_TRACK
        elif not self._playlist:
            self._current_track = track
        else:
            index = self._index_of(track)
            if index is None:
                logger.warning(f"Initial track '{track.title}' is not in the playlist, starting at the first track")
                index = 0
            self._current_track_index = index
            self._current_track = self._playlist[index]

        self._current_time = 0.0
        self._is_playing = False
        self._is_expanded = False
        self._current_lyric = ""
        self._update_lyrics()

    # Published state

    @property
    def current_track(self) -> Track:
        return self._current_track

    @property
    def current_track_index(self) -> int:
        return self._current_track_index

    @property
    def current_time(self) -> float:
        return self._current_time

    @property
    def is_playing(self) -> bool:
        return self._is_playing

    @property
    def is_expanded(self) -> bool:
        return self._is_expanded

    @property
    def current_lyric(self) -> str:
        return self._current_lyric

    @property
    def playlist(self) -> tuple[Track, ...]:
        return self._playlist

    @property
    def playlist_count(self) -> int:
        return len(self._playlist)

    @property
    def has_next_track(self) -> bool:
        return self._current_track_index < len(self._playlist) - 1

    @property
    def has_previous_track(self) -> bool:
        return self._current_track_index > 0

    @property
    def progress_percentage(self) -> float:
        duration = self._current_track.duration
        if duration <= 0:
            return 0.0
        return min(1.0, max(0.0, self._current_time / duration))

    @property
    def state(self) -> PlaybackState:
        return PlaybackState.PLAYING if self._is_playing else PlaybackState.STOPPED

    def formatted_current_time(self) -> str:
        return format_time(self._current_time)

    def formatted_duration(self) -> str:
        return format_time(self._current_track.duration)

    def snapshot(self) -> PlayerSnapshot:
        """Return the current published state."""
        return PlayerSnapshot(
            track=self._current_track,
            track_index=self._current_track_index,
            playlist_count=len(self._playlist),
            current_time=self._current_time,
            is_playing=self._is_playing,
            is_expanded=self._is_expanded,
            current_lyric=self._current_lyric,
            progress=self.progress_percentage,
            has_next_track=self.has_next_track,
            has_previous_track=self.has_previous_track,
        )

    # Subscriptions

    def subscribe(self, listener: Listener) -> None:
        """Register a listener called with a snapshot after every change."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _publish(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                logger.error(f"Player state listener {listener!r} failed: {e}", exc_info=True)

    # Playback control

    def toggle_play_pause(self) -> None:
        """Toggle between playing and stopped."""
        if self._is_playing:
            self._is_playing = False
            self._clock.stop()
            logger.debug(f"Paused at {self.formatted_current_time()}")
        else:
            if self._closed:
                logger.debug("Ignoring play on a closed player")
                return
            if self._current_track.duration <= 0:
                logger.debug(f"Ignoring play for zero-length track '{self._current_track.title}'")
                return
            self._is_playing = True
            self._clock.start(self._on_tick)
            logger.debug(f"Playing from {self.formatted_current_time()}")
        self._publish()

    def seek(self, time: float) -> None:
        """Move playback position, clamped to the track bounds."""
        self._current_time = max(0.0, min(float(time), self._current_track.duration))
        self._update_lyrics()
        self._publish()

    # UI state

    def expand(self) -> None:
        self._is_expanded = True
        self._publish()

    def collapse(self) -> None:
        self._is_expanded = False
        self._publish()

    # Track selection

    def select_track(self, track: Track) -> None:
        """Select a track from the playlist. Unknown tracks are ignored."""
        index = self._index_of(track)
        if index is None:
            logger.debug(f"Track '{track.title}' not in playlist, ignoring selection")
            return
        self.select_track_at(index)

    def select_track_at(self, index: int) -> None:
        """Select the track at ``index``, keeping the play/pause state."""
        if not 0 <= index < len(self._playlist):
            logger.debug(f"Track index {index} out of range, ignoring selection")
            return

        was_playing = self._is_playing

        if was_playing:
            self._clock.stop()
            self._is_playing = False

        self._current_track_index = index
        self._current_track = self._playlist[index]
        self._current_time = 0.0
        self._update_lyrics()
        logger.info(f"Selected track {index + 1}/{len(self._playlist)}: {self._current_track.title}")

        if was_playing:
            self._is_playing = True
            self._clock.start(self._on_tick)

        self._publish()

    def next_track(self) -> None:
        """Advance to the next track, wrapping to the first."""
        if not self._playlist:
            return
        self.select_track_at((self._current_track_index + 1) % len(self._playlist))

    def previous_track(self) -> None:
        """Go back to the previous track, wrapping to the last."""
        if not self._playlist:
            return
        if self._current_track_index == 0:
            previous_index = len(self._playlist) - 1
        else:
            previous_index = self._current_track_index - 1
        self.select_track_at(previous_index)

    # Lifecycle

    def close(self) -> None:
        """Stop the clock and drop listeners. Safe to call more than once.

        A closed player keeps answering queries but never starts its clock again.
        """
        self._closed = True
        self._clock.stop()
        self._is_playing = False
        self._listeners.clear()

    # Internals

    def _index_of(self, track: Track) -> int | None:
        for i, candidate in enumerate(self._playlist):
            if candidate.id == track.id:
                return i
        return None

    def _on_tick(self) -> None:
        if not self._is_playing:
            return

        duration = self._current_track.duration
        if self._current_time >= duration:
            self._handle_track_end()
            self._publish()
            return

        self._current_time = min(self._current_time + 1, duration)
        self._update_lyrics()

        if self._current_time >= duration:
            self._handle_track_end()

        self._publish()

    def _handle_track_end(self) -> None:
        self._is_playing = False
        self._clock.stop()
        logger.info(f"Reached end of '{self._current_track.title}'")

    def _update_lyrics(self) -> None:
        self._current_lyric = lyric_at(self._current_track.lyrics, self._current_time)

    # Debug helpers

    def simulate_track_end(self) -> None:
        """Jump to the end of the current track and stop."""
        self._current_time = self._current_track.duration
        self._update_lyrics()
        self._handle_track_end()
        self._publish()

    def log_playlist_info(self) -> None:
        logger.info("=== Playlist Info ===")
        logger.info(f"Current track: {self._current_track.title} by {self._current_track.artist}")
        logger.info(f"Track {self._current_track_index + 1} of {len(self._playlist)}")
        logger.info(f"Playing: {self._is_playing}")
        logger.info(f"Time: {self.formatted_current_time()} / {self.formatted_duration()}")
        logger.info(f"Lyrics: {self._current_lyric}")
