"""Tests for the settings key/value store."""
import json
import os
import tempfile
import unittest

from ksc_coach.services import SettingsStore


class TestSettingsStore(unittest.TestCase):
    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.temp_dir.name, "settings.json")

    def tearDown(self) -> None:
        self.temp_dir.cleanup()

    def test_values_survive_reload(self) -> None:
        store = SettingsStore(self.path)
        store.save("team", "KSC")
        store.save_many({"squad": ["Ava", "Bea"], "interval": "custom"})

        reloaded = SettingsStore(self.path)
        self.assertEqual(reloaded.load("team"), "KSC")
        self.assertEqual(reloaded.load("squad"), ["Ava", "Bea"])
        self.assertEqual(reloaded.load("interval"), "custom")
        self.assertEqual(reloaded.load("age", "none"), "none")

    def test_unknown_key_raises(self) -> None:
        store = SettingsStore(self.path)
        with self.assertRaises(KeyError):
            store.save("presence", [True])
        with self.assertRaises(KeyError):
            store.save_many({"team": "KSC", "goals": 3})
        self.assertIsNone(store.load("team"))

    def test_corrupt_file_falls_back_to_defaults(self) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("{not json")
        store = SettingsStore(self.path)
        self.assertEqual(store.load("team", ""), "")

    def test_non_object_file_is_ignored(self) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(["team"], f)
        self.assertEqual(SettingsStore(self.path).snapshot(), {})

    def test_creates_missing_directory(self) -> None:
        nested = os.path.join(self.temp_dir.name, "nested", "settings.json")
        SettingsStore(nested).save("total", "60")
        self.assertTrue(os.path.exists(nested))

    def test_in_memory_store_writes_nothing(self) -> None:
        store = SettingsStore()
        store.save("team", "KSC")
        self.assertEqual(store.load("team"), "KSC")
        self.assertEqual(os.listdir(self.temp_dir.name), [])

    def test_clear(self) -> None:
        store = SettingsStore(self.path)
        store.save("team", "KSC")
        store.clear()
        self.assertEqual(SettingsStore(self.path).snapshot(), {})


if __name__ == "__main__":
    unittest.main()
