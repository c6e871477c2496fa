"""
Interval distribution across a whole song collection.

Two display modes:
    normalized  7 buckets, magnitude 0-6, direction discarded.
    signed      13 buckets: 0, +1..+6, -1..-6. The tritone only ever fills +6.

Intervals are computed per song (section seams inside a song count, seams
between songs do not) and pooled in stored order.
"""
import collections

import numpy as np

from .constants import (
    DISPLAY_MODES,
    NORMALIZED,
    NORMALIZED_COLORS,
    NORMALIZED_LABELS,
    SIGNED,
    SIGNED_COLORS,
    SIGNED_LABELS,
    TRITONE,
)
from .intervals import song_intervals

_FrequencyTable = collections.namedtuple(
    "FrequencyTable", ["counts", "percentages", "total", "labels", "colors", "mode"]
)


class FrequencyTable(_FrequencyTable):
    __slots__ = ()

    @property
    def is_empty(self):
        """True when there is nothing to chart; render a no-data state."""
        return self.total == 0


def toggle_mode(mode):
    """The other display mode."""
    _check_mode(mode)
    return SIGNED if mode == NORMALIZED else NORMALIZED


def _check_mode(mode):
    if mode not in DISPLAY_MODES:
        raise ValueError(f"Unknown display mode {mode!r}; expected one of {DISPLAY_MODES}")


def collect_intervals(songs):
    """All intervals of all songs, concatenated song by song."""
    pooled = []
    for song in songs:
        pooled.extend(song_intervals(song))
    return pooled


def _signed_bucket(interval):
    if interval.magnitude == 0 or interval.magnitude == TRITONE:
        return interval.magnitude
    if interval.sign == "+":
        return interval.magnitude
    return TRITONE + interval.magnitude


def aggregate(songs, mode=NORMALIZED) -> FrequencyTable:
    """
    Aggregate interval frequencies over `songs`.

    Args:
        songs: Sequence of Song records (a snapshot of the store).
        mode (str): "normalized" or "signed".

    Returns:
        FrequencyTable with counts, percentages (0-100; all zero when
        total == 0), total, labels, colors and mode.
    """
    _check_mode(mode)
    intervals = collect_intervals(songs)

    if mode == NORMALIZED:
        buckets = [i.magnitude for i in intervals]
        labels, colors = NORMALIZED_LABELS, NORMALIZED_COLORS
    else:
        buckets = [_signed_bucket(i) for i in intervals]
        labels, colors = SIGNED_LABELS, SIGNED_COLORS

    counts = np.bincount(np.asarray(buckets, dtype=np.int64), minlength=len(labels))
    total = int(counts.sum())
    if total:
        percentages = counts / total * 100
    else:
        percentages = np.zeros(len(labels), dtype=np.float64)

    return FrequencyTable(
        counts=counts.tolist(),
        percentages=percentages.tolist(),
        total=total,
        labels=list(labels),
        colors=list(colors),
        mode=mode,
    )
