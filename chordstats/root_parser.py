import re

from .constants import _NOTE_TO_PC, _PC_TO_NOTE

# Root letter plus at most one accidental. Case is normalised afterwards so
# "db", "DB" and "Db" all reach the same table entry.
_ROOT_RE = re.compile(r"^([A-G][#b]?)", re.IGNORECASE)


def parse_root(chord_str):
    """
    Map a chord symbol to the pitch class (0-11) of its root.

    Only the leading root is read; quality and extensions are ignored
    ("Cmaj7" -> 0, "D#m7b5" -> 3, "Ebsus4" -> 3).

    Returns:
        int or None: None when the symbol does not start with a root letter
        A-G or the spelled root is not in the enharmonic table.
    """
    if not chord_str:
        return None

    root_match = _ROOT_RE.match(chord_str)
    if not root_match:
        return None

    root = root_match.group(1)
    letter = root[0].upper()
    accidental = root[1:].lower()  # "B" -> "b"; "#" is unaffected
    return _NOTE_TO_PC.get(letter + accidental)


def parse_roots(chords):
    """Parse every chord and drop the ones without a recognisable root."""
    pcs = []
    for chord in chords:
        pc = parse_root(chord)
        if pc is not None:
            pcs.append(pc)
    return pcs


def pitch_class_name(pc):
    """Flat-preferred note name for a pitch class, e.g. 1 -> 'Db'."""
    return _PC_TO_NOTE[pc % 12]
