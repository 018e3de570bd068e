from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

LYRIC_BUCKET_SECONDS = 30
NO_LYRICS_PLACEHOLDER = "No lyrics available"


@dataclass
class LyricSegment:
    """Represents a single lyric line and the time window it is shown in."""
    start: float
    end: float
    text: str


def lyric_index_at(elapsed: float, line_count: int) -> int:
    """Return the lyric line index for an elapsed time.

    One line is shown per 30-second bucket, clamped to the last line for
    tracks longer than ``line_count * 30`` seconds. Returns -1 when there are
    no lines.
    """
    if line_count <= 0:
        return -1
    bucket = int(max(0.0, elapsed) // LYRIC_BUCKET_SECONDS)
    return min(bucket, line_count - 1)


def lyric_at(lines: Sequence[str], elapsed: float) -> str:
    """Return the lyric line active at ``elapsed``."""
    index = lyric_index_at(elapsed, len(lines))
    if index < 0:
        return NO_LYRICS_PLACEHOLDER
    return lines[index]


def bucket_segments(lines: Sequence[str]) -> list[LyricSegment]:
    """Map lyric lines onto their time windows.

    The last line stays active for the rest of the track.
    """
    segments = []
    for i, text in enumerate(lines):
        start = float(i * LYRIC_BUCKET_SECONDS)
        end = math.inf if i == len(lines) - 1 else float((i + 1) * LYRIC_BUCKET_SECONDS)
        segments.append(LyricSegment(start=start, end=end, text=text))
    return segments
