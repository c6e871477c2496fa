"""
Song and Section records.

A song is an ordered list of labelled sections (A, B, Bridge, ...), each an
ordered list of raw chord tokens exactly as the user typed them. Chords are
only checked for being non-blank; their roots are parsed later, on demand.

Records are plain namedtuples so they can be compared, hashed and passed by
value into the statistics code. `song_to_dict` / `song_from_dict` convert to
and from the JSON shape kept in the song store.
"""
import collections

Section = collections.namedtuple("Section", ["label", "chords"])
Song = collections.namedtuple("Song", ["title", "sections"])


def split_chords(chord_text):
    """Split a whitespace-separated chord field: 'Cmaj7  Dm7 G7' -> [...]."""
    if not chord_text:
        return []
    return chord_text.split()


def build_song(title, raw_sections) -> Song:
    """
    Build a Song from form-style input.

    Args:
        title (str): Song title; surrounding whitespace is stripped.
        raw_sections: Iterable of (label, chords) pairs. `chords` may be a
            whitespace-separated string or a list of tokens.

    Sections with a blank label or no chords are dropped.

    Raises:
        ValueError: if the title is blank or no valid section remains.
    """
    title = (title or "").strip()

    sections = []
    for label, chords in raw_sections:
        label = (label or "").strip()
        if isinstance(chords, str):
            tokens = split_chords(chords)
        else:
            tokens = [c.strip() for c in chords if c and c.strip()]
        if label and tokens:
            sections.append(Section(label, tuple(tokens)))

    if not title or not sections:
        raise ValueError("Please provide a song title and at least one valid section.")
    return Song(title, tuple(sections))


def song_chords(song):
    """All chords of a song in order, section seams included."""
    return [chord for section in song.sections for chord in section.chords]


def song_to_dict(song):
    return {
        "title": song.title,
        "sections": [
            {"label": s.label, "chords": list(s.chords)} for s in song.sections
        ],
    }


def _clean_text(value):
    return value.strip() if isinstance(value, str) else ""


def song_from_dict(data):
    """
    Rebuild a Song from its stored dict form.

    Non-string or blank chord tokens are dropped, as are sections left
    without a label or chords. Returns None when `data` is not a dict or
    no title or valid section remains.
    """
    if not isinstance(data, dict):
        return None
    title = _clean_text(data.get("title"))
    sections = []
    raw_sections = data.get("sections")
    if isinstance(raw_sections, list):
        for sec in raw_sections:
            if not isinstance(sec, dict):
                continue
            label = _clean_text(sec.get("label"))
            chords = sec.get("chords")
            if not isinstance(chords, list):
                continue
            chords = tuple(c.strip() for c in chords if isinstance(c, str) and c.strip())
            if label and chords:
                sections.append(Section(label, chords))
    if not title or not sections:
        return None
    return Song(title, tuple(sections))
