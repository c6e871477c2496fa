"""
Text and tabular renderings of the interval statistics.

Everything here consumes the plain data returned by intervals.py and
aggregate.py; nothing is computed twice.
"""
import music21
import music21.interval
import pandas as pd

from .aggregate import aggregate
from .constants import NORMALIZED, NORMALIZED_LABELS
from .intervals import interval_pairs, section_interval_rows, song_interval_summary
from .root_parser import parse_root, pitch_class_name
from .songs import song_chords

_BAR = "─" * 60
_NO_DATA = "No intervals yet."


def interval_name(interval):
    """Readable name, e.g. +5 -> 'Ascending Perfect Fourth'."""
    name = music21.interval.Interval(interval.magnitude).niceName
    if interval.magnitude == 0:
        return name
    direction = "Ascending" if interval.sign == "+" else "Descending"
    return f"{direction} {name}"


# ── DataFrames ────────────────────────────────────────────────────────────────

def frequency_frame(table):
    """One row per bucket: interval, count, percent, color."""
    return pd.DataFrame({
        "interval": table.labels,
        "count":    table.counts,
        "percent":  table.percentages,
        "color":    table.colors,
    })


def song_summary_frame(songs):
    """One row per song with interval counts by magnitude 0-6."""
    rows = [song_interval_summary(song) for song in songs]
    return pd.DataFrame(
        rows,
        index=pd.Index([song.title for song in songs], name="title"),
        columns=list(NORMALIZED_LABELS),
    )


def export_frequency_csv(songs, output_path, mode=NORMALIZED):
    """Write the global distribution to CSV. Returns the number of intervals."""
    table = aggregate(songs, mode)
    frequency_frame(table).to_csv(output_path, index=False)
    return table.total


def export_song_summary_csv(songs, output_path):
    """Write one row of magnitude counts per song. Returns the number of songs."""
    df = song_summary_frame(songs)
    df.to_csv(output_path)
    return len(df)


# ── Text ──────────────────────────────────────────────────────────────────────

def format_frequency_table(table, width=40):
    """
    Horizontal bar chart of a FrequencyTable.

    Buckets with no intervals are skipped. An empty table renders as the
    no-data message instead of a row of zeros.
    """
    if table.is_empty:
        return _NO_DATA
    lines = [f"Interval Distribution ({table.mode}, {table.total} intervals)", _BAR]
    for label, count, pct in zip(table.labels, table.counts, table.percentages):
        if count == 0:
            continue
        bar = "█" * max(1, round(pct / 100 * width))
        lines.append(f"  {label:>3}  {bar:<{width}}  {pct:5.1f}%  ({count})")
    return "\n".join(lines)


def format_song(song, index=None):
    """Title, section summary and the per-song Int/Ct count table."""
    prefix = f"[{index}] " if index is not None else ""
    sections = " | ".join(f"{s.label}: {' '.join(s.chords)}" for s in song.sections)
    counts = song_interval_summary(song)
    header = "Int " + "".join(f"{i:>4}" for i in range(len(counts)))
    row = "Ct  " + "".join(f"{c:>4}" for c in counts)
    return "\n".join([f"{prefix}{song.title}", f"    {sections}", f"    {header}", f"    {row}"])


def format_song_details(song):
    """Per-section detail view: a chord row and an interval row per section."""
    lines = []
    for row in section_interval_rows(song):
        cells = ["-" if iv is None else str(iv) for iv in row.intervals]
        widths = [max(len(c), len(i)) for c, i in zip(row.chords, cells)]
        lines.append(f"{row.label}:")
        lines.append("  " + "  ".join(c.ljust(w) for c, w in zip(row.chords, widths)))
        lines.append("  " + "  ".join(i.ljust(w) for i, w in zip(cells, widths)))
    return "\n".join(lines)


def format_interval_pairs(song):
    """
    Every root movement of the song, section seams included, with the source
    chords, their roots and the music21 interval name.
    """
    lines = []
    for pair in interval_pairs(song_chords(song)):
        src = f"{pair.source} ({pitch_class_name(parse_root(pair.source))})"
        dst = f"{pair.target} ({pitch_class_name(parse_root(pair.target))})"
        lines.append(f"  {src:<14} → {dst:<14} {str(pair.interval):>3}  {interval_name(pair.interval)}")
    return "\n".join(lines) if lines else _NO_DATA
