"""Unit tests for preference persistence."""

import json
from unittest.mock import patch

import pytest

from stylematch.infrastructure import preference_store as preference_module
from stylematch.infrastructure.preference_store import (
    RECENT_SEARCHES_KEY,
    SAVED_ITEMS_KEY,
    InMemoryPreferenceStore,
    JsonPreferenceStore,
)
from stylematch.utils.exceptions import PreferenceStoreError


class TestInMemoryPreferenceStore:
    """Test the in-process store."""

    def test_round_trip(self):
        store = InMemoryPreferenceStore()
        store.save_recent(["a", "b"])
        store.save_saved({"x"})
        assert store.load_recent() == ["a", "b"]
        assert store.load_saved() == {"x"}

    def test_returns_copies(self):
        store = InMemoryPreferenceStore(recent=["a"])
        store.load_recent().append("b")
        assert store.load_recent() == ["a"]


class TestJsonPreferenceStore:
    """Test the JSON file store."""

    def test_missing_file_is_empty(self, tmp_path):
        store = JsonPreferenceStore(tmp_path / "prefs.json")
        assert store.load_recent() == []
        assert store.load_saved() == set()

    def test_keys_are_independent(self, tmp_path):
        """Test writing one list keeps the other."""
        path = tmp_path / "nested" / "prefs.json"
        store = JsonPreferenceStore(path)
        store.save_saved({"b", "a"})
        store.save_recent(["denim"])

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {SAVED_ITEMS_KEY: ["a", "b"], RECENT_SEARCHES_KEY: ["denim"]}
        assert JsonPreferenceStore(path).load_saved() == {"a", "b"}

    def test_corrupt_file_warns_and_loads_empty(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("{oops", encoding="utf-8")
        store = JsonPreferenceStore(path)

        with patch.object(preference_module.logger, "warning") as warning:
            assert store.load_recent() == []
        warning.assert_called_once()

    def test_non_string_entries_dropped(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps({RECENT_SEARCHES_KEY: ["ok", 3, None]}), encoding="utf-8")
        assert JsonPreferenceStore(path).load_recent() == ["ok"]

    def test_write_failure_raises(self, tmp_path):
        # Parent "directory" is a file, so the write cannot succeed
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = JsonPreferenceStore(blocker / "prefs.json")

        with pytest.raises(PreferenceStoreError):
            store.save_recent(["x"])
