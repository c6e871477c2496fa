"""
Signed chromatic intervals between consecutive chord roots.

An interval is the shorter way round the 12-class pitch circle from one root
to the next, tagged "+" (ascending) or "-" (descending), so its magnitude is
always 0-6. The tritone is the same distance both ways and is always reported
as +6.
"""
import collections

import numpy as np

from .constants import TRITONE
from .root_parser import parse_root, parse_roots
from .songs import song_chords


class SignedInterval(collections.namedtuple("SignedInterval", ["sign", "magnitude"])):
    __slots__ = ()

    def __str__(self):
        return f"{self.sign}{self.magnitude}"


IntervalPair = collections.namedtuple("IntervalPair", ["source", "target", "interval"])
SectionRow = collections.namedtuple("SectionRow", ["label", "chords", "intervals"])


def signed_interval(a, b) -> SignedInterval:
    """Shortest signed interval from pitch class `a` (earlier) to `b` (later)."""
    up = (b - a) % 12
    down = (a - b) % 12
    if up == TRITONE and down == TRITONE:
        return SignedInterval("+", TRITONE)
    if up <= down:
        return SignedInterval("+", up)
    return SignedInterval("-", down)


def compute_interval_sequence(pitch_classes):
    """
    Intervals between each adjacent pair of pitch classes.

    None entries (chords whose root did not parse) are dropped first, so the
    chords on either side of them become adjacent.
    """
    pcs = [pc for pc in pitch_classes if pc is not None]
    return [signed_interval(a, b) for a, b in zip(pcs, pcs[1:])]


def interval_pairs(chords):
    """Like compute_interval_sequence, but from chord strings, keeping them."""
    rooted = [(chord, parse_root(chord)) for chord in chords]
    rooted = [(chord, pc) for chord, pc in rooted if pc is not None]
    return [
        IntervalPair(src, dst, signed_interval(a, b))
        for (src, a), (dst, b) in zip(rooted, rooted[1:])
    ]


def frequency_by_magnitude(intervals):
    """7-element count list indexed by magnitude 0-6; sign is ignored."""
    magnitudes = np.fromiter((i.magnitude for i in intervals), dtype=np.int64)
    return np.bincount(magnitudes, minlength=TRITONE + 1).tolist()


def song_intervals(song):
    """Interval sequence over a whole song; section seams count as adjacent."""
    return compute_interval_sequence(parse_roots(song_chords(song)))


def song_interval_summary(song):
    """Per-song summary row: interval counts by magnitude."""
    return frequency_by_magnitude(song_intervals(song))


def section_interval_rows(song):
    """
    Per-section detail rows: each chord with the interval arriving at it.

    Each section is read on its own. The first chord of a section has no
    interval (None), and neither does any chord that lacks a parseable root
    or follows one.
    """
    rows = []
    for section in song.sections:
        cells = []
        prev = None
        for i, chord in enumerate(section.chords):
            pc = parse_root(chord)
            if i == 0 or pc is None or prev is None:
                cells.append(None)
            else:
                cells.append(signed_interval(prev, pc))
            prev = pc
        rows.append(SectionRow(section.label, list(section.chords), cells))
    return rows
