import random
import time

from chordstats.aggregate import aggregate
from chordstats.constants import NORMALIZED, SIGNED
from chordstats.songs import build_song

_ROOTS = ["C", "Db", "D", "Eb", "E", "F", "F#", "G", "Ab", "A", "Bb", "B"]
_QUALITIES = ["", "m7", "7", "maj7", "m7b5", "dim7"]


def make_catalog(n_songs, rng):
    songs = []
    for i in range(n_songs):
        sections = []
        for label in "AAB":
            chords = [rng.choice(_ROOTS) + rng.choice(_QUALITIES) for _ in range(8)]
            sections.append((label, chords))
        songs.append(build_song(f"Song {i}", sections))
    return songs


def run_benchmark():
    # Setup
    rng = random.Random(42)
    songs = make_catalog(10000, rng)

    for mode in (NORMALIZED, SIGNED):
        start_time = time.perf_counter()
        table = aggregate(songs, mode)
        end_time = time.perf_counter()
        print(f"{mode:<10} {table.total} intervals in {end_time - start_time:.4f} seconds")


if __name__ == '__main__':
    run_benchmark()
