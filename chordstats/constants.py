import os
from types import MappingProxyType

# ── Pitch-class lookup tables ─────────────────────────────────────────────────

# Enharmonic spellings collapse onto the same class. Keys are canonical:
# upper-case letter, then "#" or lower-case "b".
_NOTE_TO_PC = MappingProxyType({
    "C": 0,   "B#": 0,
    "C#": 1,  "Db": 1,
    "D": 2,
    "D#": 3,  "Eb": 3,
    "E": 4,   "Fb": 4,
    "F": 5,   "E#": 5,
    "F#": 6,  "Gb": 6,
    "G": 7,
    "G#": 8,  "Ab": 8,
    "A": 9,
    "A#": 10, "Bb": 10,
    "B": 11,  "Cb": 11,
})
# Flat-preferred spelling for displaying a pitch class.
_PC_TO_NOTE: tuple[str, ...] = (
    "C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"
)

# Largest shortest-path distance between two pitch classes (the tritone).
TRITONE = 6

# ── Display modes ─────────────────────────────────────────────────────────────

NORMALIZED = "normalized"
SIGNED = "signed"
DISPLAY_MODES = (NORMALIZED, SIGNED)

# Bucket labels per mode. Signed: 0, ascending +1..+6, descending -1..-6.
NORMALIZED_LABELS: tuple[str, ...] = tuple(str(i) for i in range(TRITONE + 1))
SIGNED_LABELS: tuple[str, ...] = (
    ("0",)
    + tuple(f"+{i}" for i in range(1, TRITONE + 1))
    + tuple(f"-{i}" for i in range(1, TRITONE + 1))
)

NORMALIZED_COLORS: tuple[str, ...] = (
    "#2980b9", "#27ae60", "#f39c12", "#e67e22", "#8e44ad", "#c0392b", "#7f8c8d",
)
SIGNED_COLORS: tuple[str, ...] = NORMALIZED_COLORS + (
    "#16a085", "#2ecc71", "#f1c40f", "#e67e22", "#9b59b6", "#e74c3c",
)

# ── Storage ───────────────────────────────────────────────────────────────────

# Name of the slot holding the whole song collection.
STORE_KEY = "jazzSongs"

# Project root (parent of chordstats/)
_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_STORE_PATH = os.path.join(_ROOT, "data", "songs.json")
