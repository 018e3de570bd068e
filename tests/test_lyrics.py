import math

from models.lyrics import (
    LYRIC_BUCKET_SECONDS,
    NO_LYRICS_PLACEHOLDER,
    bucket_segments,
    lyric_at,
    lyric_index_at,
)

EIGHT_LINES = [f"line {i}" for i in range(1, 9)]


def test_one_line_per_bucket():
    assert lyric_index_at(0, 8) == 0
    assert lyric_index_at(29.9, 8) == 0
    assert lyric_index_at(30, 8) == 1
    assert lyric_index_at(45, 8) == 1


def test_long_tracks_clamp_to_last_line():
    assert lyric_index_at(400, 8) == 7
    assert lyric_at(EIGHT_LINES, 400) == "line 8"


def test_second_line_at_45_seconds():
    assert lyric_at(EIGHT_LINES, 45) == "line 2"


def test_no_lines_gives_placeholder():
    assert lyric_index_at(10, 0) == -1
    assert lyric_at([], 10) == NO_LYRICS_PLACEHOLDER


def test_negative_elapsed_treated_as_start():
    assert lyric_index_at(-5, 3) == 0


def test_bucket_segments_are_contiguous():
    segments = bucket_segments(EIGHT_LINES)
    assert [s.text for s in segments] == EIGHT_LINES
    assert segments[0].start == 0
    for previous, current in zip(segments, segments[1:]):
        assert previous.end == current.start
        assert current.start - previous.start == LYRIC_BUCKET_SECONDS
    assert math.isinf(segments[-1].end)


def test_bucket_segments_agree_with_index():
    segments = bucket_segments(EIGHT_LINES)
    for elapsed in (0, 15, 30, 95, 210, 239, 500):
        index = lyric_index_at(elapsed, len(segments))
        assert segments[index].start <= elapsed < segments[index].end
