import json
import os
import shutil
import tempfile
import unittest

from chordstats.aggregate import aggregate
from chordstats.constants import STORE_KEY
from chordstats.song_store import SongStore
from chordstats.songs import build_song


class TestSongStore(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.test_dir, "nested", "songs.json")
        self.store = SongStore(self.path)
        self.song_a = build_song("A Song", [("A", "C Am Dm G")])
        self.song_b = build_song("B Song", [("A", "F Bb"), ("B", "C7")])

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def _write(self, text):
        os.makedirs(os.path.dirname(self.path), exist_ok=True)
        with open(self.path, "w") as f:
            f.write(text)

    def test_missing_file_is_empty(self):
        self.assertEqual(self.store.load(), [])

    def test_save_and_load(self):
        self.store.save([self.song_a, self.song_b])
        self.assertEqual(self.store.load(), [self.song_a, self.song_b])

        with open(self.path) as f:
            slots = json.load(f)
        self.assertIn(STORE_KEY, slots)
        self.assertEqual(slots[STORE_KEY][0]["title"], "A Song")

    def test_save_overwrites_whole_slot(self):
        self.store.save([self.song_a, self.song_b])
        self.store.save([self.song_b])
        self.assertEqual(self.store.load(), [self.song_b])

    def test_other_slots_are_kept(self):
        self._write(json.dumps({"theme": "dark"}))
        self.store.save([self.song_a])
        with open(self.path) as f:
            slots = json.load(f)
        self.assertEqual(slots["theme"], "dark")

    def test_add_and_delete(self):
        self.store.add(self.song_a)
        songs = self.store.add(self.song_b)
        self.assertEqual(songs, [self.song_a, self.song_b])

        removed = self.store.delete(0)
        self.assertEqual(removed, self.song_a)
        self.assertEqual(self.store.load(), [self.song_b])

    def test_delete_out_of_range(self):
        self.store.add(self.song_a)
        with self.assertRaises(IndexError):
            self.store.delete(1)
        with self.assertRaises(IndexError):
            self.store.delete(-1)
        self.assertEqual(self.store.load(), [self.song_a])

    def test_clear(self):
        self.store.save([self.song_a])
        self.store.clear()
        self.assertEqual(self.store.load(), [])
        # clearing an absent store is a no-op
        SongStore(os.path.join(self.test_dir, "none.json")).clear()

    def test_malformed_json_is_empty(self):
        self._write("{not json")
        self.assertEqual(self.store.load(), [])

    def test_wrong_shapes_are_empty(self):
        self._write(json.dumps(["a", "list"]))
        self.assertEqual(self.store.load(), [])

        self._write(json.dumps({STORE_KEY: "nope"}))
        self.assertEqual(self.store.load(), [])

    def test_non_object_records_are_skipped(self):
        self._write(json.dumps({STORE_KEY: [
            42,
            {"title": "Kept", "sections": [{"label": "A", "chords": ["C", "G"]}]},
        ]}))
        songs = self.store.load()
        self.assertEqual(len(songs), 1)
        self.assertEqual(songs[0].title, "Kept")

    def test_non_string_chords_are_dropped(self):
        self._write(json.dumps({STORE_KEY: [
            {"title": "T", "sections": [{"label": "A", "chords": ["C", False, 5, None]}]},
        ]}))
        songs = self.store.load()
        self.assertEqual(len(songs), 1)
        self.assertEqual(songs[0].sections[0].chords, ("C",))
        self.assertTrue(aggregate(songs).is_empty)

    def test_records_breaking_song_invariants_are_skipped(self):
        self._write(json.dumps({STORE_KEY: [
            {},
            {"title": "", "sections": [{"label": "A", "chords": ["C"]}]},
            {"title": "No sections", "sections": []},
            {"title": "Blank label", "sections": [{"label": " ", "chords": ["C"]}]},
            {"title": "Kept", "sections": [{"label": "A", "chords": ["C", "G"]}]},
        ]}))
        self.assertEqual([s.title for s in self.store.load()], ["Kept"])

    def test_custom_key(self):
        other = SongStore(self.path, key="otherSongs")
        other.save([self.song_a])
        self.assertEqual(self.store.load(), [])
        self.assertEqual(other.load(), [self.song_a])


if __name__ == "__main__":
    unittest.main()
