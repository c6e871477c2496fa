#!/usr/bin/env python3
"""
scripts/song_stats.py — catalog songs as chord sections and report the
intervals between consecutive chord roots.

Usage (from project root):
    python scripts/song_stats.py add "Autumn Leaves" -s A "Cm7 F7 Bbmaj7 Ebmaj7" -s B "Am7b5 D7 Gm"
    python scripts/song_stats.py list
    python scripts/song_stats.py show 0 --names
    python scripts/song_stats.py stats            # normalized (0..6)
    python scripts/song_stats.py stats --signed   # +n / -n
    python scripts/song_stats.py export intervals.csv --signed
    python scripts/song_stats.py export per_song.csv --per-song
    python scripts/song_stats.py delete 0
    python scripts/song_stats.py delete-all --yes
"""
import argparse
import os
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

import warnings
warnings.filterwarnings("ignore", module="music21")

from chordstats.aggregate import aggregate, toggle_mode
from chordstats.constants import DEFAULT_STORE_PATH, NORMALIZED
from chordstats.report import (
    export_frequency_csv,
    export_song_summary_csv,
    format_frequency_table,
    format_interval_pairs,
    format_song,
    format_song_details,
)
from chordstats.song_store import SongStore
from chordstats.songs import build_song


def _confirm(prompt):
    try:
        answer = input(f"{prompt} [y/N] ").strip().lower()
    except EOFError:
        answer = ""
    return answer in ("y", "yes")


def _mode(args):
    # --signed flips the default normalized view
    return toggle_mode(NORMALIZED) if args.signed else NORMALIZED


# ── Commands ──────────────────────────────────────────────────────────────────

def cmd_add(store, args):
    song = build_song(args.title, args.section or [])
    songs = store.add(song)
    print(f"Added \"{song.title}\" ({len(song.sections)} section(s)); {len(songs)} song(s) stored.")
    return 0


def cmd_list(store, args):
    songs = store.load()
    print(format_frequency_table(aggregate(songs, _mode(args))))
    print()
    if not songs:
        print("No songs yet. Add one with the 'add' command.")
        return 0
    for idx, song in enumerate(songs):
        print(format_song(song, idx))
    return 0


def cmd_show(store, args):
    songs = store.load()
    if not 0 <= args.index < len(songs):
        raise IndexError(f"No song at index {args.index} ({len(songs)} stored)")
    song = songs[args.index]
    print(format_song(song, args.index))
    print()
    print(format_song_details(song))
    if args.names:
        print()
        print(format_interval_pairs(song))
    return 0


def cmd_stats(store, args):
    print(format_frequency_table(aggregate(store.load(), _mode(args))))
    return 0


def cmd_export(store, args):
    songs = store.load()
    if args.per_song:
        n_songs = export_song_summary_csv(songs, args.out)
        print(f"Wrote {n_songs} song(s) -> {args.out}")
        return 0
    total = export_frequency_csv(songs, args.out, _mode(args))
    print(f"Wrote {total} interval(s) -> {args.out}")
    return 0


def cmd_delete(store, args):
    songs = store.load()
    if not 0 <= args.index < len(songs):
        raise IndexError(f"No song at index {args.index} ({len(songs)} stored)")
    title = songs[args.index].title
    if not args.yes and not _confirm(f"Are you sure you want to delete \"{title}\"?"):
        print("Aborted.")
        return 0
    store.delete(args.index)
    print(f"Deleted \"{title}\".")
    return 0


def cmd_delete_all(store, args):
    if not args.yes and not _confirm(
        "Are you sure you want to delete all songs? This cannot be undone."
    ):
        print("Aborted.")
        return 0
    store.clear()
    print("Deleted all songs.")
    return 0


# ── Main ──────────────────────────────────────────────────────────────────────

def build_parser():
    parser = argparse.ArgumentParser(
        description="Catalog songs by chord sections and report root-interval statistics."
    )
    parser.add_argument("--store", type=str, default=DEFAULT_STORE_PATH,
                        help=f"Song store JSON file (default: {DEFAULT_STORE_PATH}).")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("add", help="Add a song.")
    p.add_argument("title", type=str, help="Song title.")
    p.add_argument("-s", "--section", nargs=2, action="append", metavar=("LABEL", "CHORDS"),
                   help="Section label and space-separated chords; repeat per section.")
    p.set_defaults(func=cmd_add)

    p = sub.add_parser("list", help="List songs with their interval summaries.")
    p.add_argument("--signed", action="store_true", help="Separate +n and -n intervals.")
    p.set_defaults(func=cmd_list)

    p = sub.add_parser("show", help="Show per-section intervals of one song.")
    p.add_argument("index", type=int)
    p.add_argument("--names", action="store_true", help="Also list each root movement with its interval name.")
    p.set_defaults(func=cmd_show)

    p = sub.add_parser("stats", help="Global interval distribution.")
    p.add_argument("--signed", action="store_true", help="Separate +n and -n intervals.")
    p.set_defaults(func=cmd_stats)

    p = sub.add_parser("export", help="Write the global distribution to CSV.")
    p.add_argument("out", type=str, help="Output CSV path.")
    p.add_argument("--signed", action="store_true", help="Separate +n and -n intervals.")
    p.add_argument("--per-song", action="store_true",
                   help="Write per-song interval counts instead of the global distribution.")
    p.set_defaults(func=cmd_export)

    p = sub.add_parser("delete", help="Delete one song.")
    p.add_argument("index", type=int)
    p.add_argument("--yes", action="store_true", help="Do not ask for confirmation.")
    p.set_defaults(func=cmd_delete)

    p = sub.add_parser("delete-all", help="Delete every song.")
    p.add_argument("--yes", action="store_true", help="Do not ask for confirmation.")
    p.set_defaults(func=cmd_delete_all)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    store = SongStore(args.store)
    try:
        return args.func(store, args)
    except (ValueError, IndexError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
