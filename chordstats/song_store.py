"""
JSON-file key-value store for the song collection.

The file holds an object of named slots; the whole song list lives in one
slot (STORE_KEY, "jazzSongs") and is always read and written as a unit:
no partial updates, no migrations, no versioning.

Usage:
    store = SongStore("data/songs.json")
    songs = store.load()
    store.add(build_song("Autumn Leaves", [("A", "Cm7 F7 Bbmaj7 Ebmaj7")]))
"""
import json
import os

from .constants import DEFAULT_STORE_PATH, STORE_KEY
from .songs import song_from_dict, song_to_dict


def _load_slots(path):
    if os.path.isfile(path):
        try:
            with open(path, encoding="utf-8") as f:
                slots = json.load(f)
            if isinstance(slots, dict):
                return slots
        except (json.JSONDecodeError, UnicodeDecodeError, OSError):
            pass
    return {}


def _save_slots(path, slots):
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(slots, f, indent=2)


class SongStore:
    """Load/save the full song list in a single named slot of a JSON file."""

    def __init__(self, path=DEFAULT_STORE_PATH, key=STORE_KEY):
        self.path = path
        self.key = key

    # ── Public API ──────────────────────────────────────────────────────────

    def load(self):
        """
        Return the stored songs in order.

        A missing file, missing slot or malformed data all read as an empty
        collection. Records that do not form a valid song are skipped.
        """
        data = _load_slots(self.path).get(self.key)
        if not isinstance(data, list):
            return []
        songs = []
        for record in data:
            song = song_from_dict(record)
            if song is not None:
                songs.append(song)
        return songs

    def save(self, songs):
        """Overwrite the slot with `songs`; other slots in the file are kept."""
        slots = _load_slots(self.path)
        slots[self.key] = [song_to_dict(s) for s in songs]
        _save_slots(self.path, slots)

    def add(self, song):
        songs = self.load()
        songs.append(song)
        self.save(songs)
        return songs

    def delete(self, index):
        """Remove the song at `index` and return it. Raises IndexError."""
        songs = self.load()
        if not 0 <= index < len(songs):
            raise IndexError(f"No song at index {index} ({len(songs)} stored)")
        removed = songs.pop(index)
        self.save(songs)
        return removed

    def clear(self):
        """Drop the whole slot (the "delete all songs" action)."""
        slots = _load_slots(self.path)
        if self.key in slots:
            del slots[self.key]
            _save_slots(self.path, slots)
