import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from exsel.settings import (
    DEFAULT_ACTIVE_FILTERS,
    ConfigurationStore,
    JsonFileBackend,
    MemoryBackend,
    SelectionStyle,
    decode_filter_ids,
)
from exsel.storage import SETTINGS_ENV_VAR, settings_path


class TestConfigurationStore(unittest.TestCase):
    def test_defaults_when_nothing_is_persisted(self):
        store = ConfigurationStore(MemoryBackend())
        configuration = store.load()
        self.assertEqual(configuration.active_filter_ids, DEFAULT_ACTIVE_FILTERS)
        self.assertEqual(configuration.selection_style, SelectionStyle(None, None))
        self.assertTrue(configuration.desktop_notification)
        self.assertFalse(configuration.clipboard_write)

    def test_default_menu_matches_builtin_order(self):
        self.assertEqual(len(DEFAULT_ACTIVE_FILTERS), 21)
        self.assertEqual(DEFAULT_ACTIVE_FILTERS[0], "LowerCase")
        self.assertEqual(DEFAULT_ACTIVE_FILTERS[-1], "FormatSQL")
        self.assertNotIn("PigLatin", DEFAULT_ACTIVE_FILTERS)

    def test_persisted_list_is_returned_in_order(self):
        store = ConfigurationStore(MemoryBackend({"visibleFilters": ["Reverse", "LowerCase"]}))
        self.assertEqual(store.get_active_filter_ids(), ("Reverse", "LowerCase"))

    def test_json_encoded_list_is_accepted(self):
        store = ConfigurationStore(MemoryBackend({"visibleFilters": '["MD5", "SHA1"]'}))
        self.assertEqual(store.get_active_filter_ids(), ("MD5", "SHA1"))

    def test_persisted_empty_list_means_empty_menu(self):
        store = ConfigurationStore(MemoryBackend({"visibleFilters": []}))
        self.assertEqual(store.get_active_filter_ids(), ())

    def test_malformed_list_falls_back_to_defaults(self):
        for value in ("not json", "{}", 42, ["ok", 3], {"a": 1}):
            with self.subTest(value=value):
                store = ConfigurationStore(MemoryBackend({"visibleFilters": value}))
                self.assertEqual(store.get_active_filter_ids(), DEFAULT_ACTIVE_FILTERS)

    def test_style_fields_fall_back_independently(self):
        store = ConfigurationStore(MemoryBackend({"selectionColor": "#fff", "selectionBackground": 7}))
        style = store.get_selection_style()
        self.assertEqual(style.color, "#fff")
        self.assertIsNone(style.background)
        self.assertEqual(style.as_dict(), {"color": "#fff", "background": None})

    def test_boolean_settings_decode_strings(self):
        store = ConfigurationStore(MemoryBackend({"desktopNotification": "off", "clipboardWrite": "yes"}))
        self.assertFalse(store.get_desktop_notification())
        self.assertTrue(store.get_clipboard_write())

        store = ConfigurationStore(MemoryBackend({"desktopNotification": "maybe"}))
        self.assertTrue(store.get_desktop_notification())

    def test_decode_filter_ids(self):
        self.assertEqual(decode_filter_ids(["A"]), ("A",))
        self.assertIsNone(decode_filter_ids(None))
        self.assertIsNone(decode_filter_ids('"A"'))


class TestJsonFileBackend(unittest.TestCase):
    def test_round_trip(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "nested" / "settings.json"
            backend = JsonFileBackend(path)
            self.assertEqual(backend.read_all(), {})

            backend.set("visibleFilters", ["Reverse"])
            backend.set("clipboardWrite", True)
            self.assertEqual(json.loads(path.read_text(encoding="utf-8"))["visibleFilters"], ["Reverse"])

            configuration = ConfigurationStore(JsonFileBackend(path)).load()
            self.assertEqual(configuration.active_filter_ids, ("Reverse",))
            self.assertTrue(configuration.clipboard_write)

            backend.remove("visibleFilters")
            self.assertIsNone(backend.get("visibleFilters"))
            backend.reset()
            self.assertEqual(backend.read_all(), {})

    def test_broken_file_is_never_fatal(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "settings.json"
            path.write_text("{broken", encoding="utf-8")
            store = ConfigurationStore(JsonFileBackend(path))
            self.assertEqual(store.get_active_filter_ids(), DEFAULT_ACTIVE_FILTERS)

            path.write_text("[1, 2]", encoding="utf-8")
            self.assertEqual(JsonFileBackend(path).read_all(), {})

    def test_settings_path_honours_environment(self):
        with patch.dict(os.environ, {SETTINGS_ENV_VAR: "/tmp/custom-settings.json"}):
            self.assertEqual(settings_path(), Path("/tmp/custom-settings.json"))
            self.assertEqual(JsonFileBackend().path, Path("/tmp/custom-settings.json"))
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(settings_path(), Path("output") / "config" / "settings.json")


if __name__ == "__main__":
    unittest.main()
