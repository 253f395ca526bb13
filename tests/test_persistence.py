"""Tests for the JSON alias store.

Covers:
  1. load on a missing or empty file yields ``{}`` and creates the file
  2. save then load round-trips
  3. malformed content raises instead of silently resetting the aliases
  4. CommandStore-specific validation and lookup
"""

from __future__ import annotations

import json
import stat

import pytest

from ugg.errors import (
    ConfigIOError,
    ConfigParseError,
    ConfigSerializeError,
    UnknownAliasError,
)
from ugg.persistence import CommandStore
from ugg.persistence._base import JsonStore


# ---------------------------------------------------------------------------
# Base JsonStore
# ---------------------------------------------------------------------------


class TestJsonStore:
    def test_load_raw_nonexistent_creates_file(self, tmp_path):
        path = tmp_path / "nope.json"
        store = JsonStore(path)
        assert store.load_raw() == {}
        assert path.exists()
        assert path.read_text() == ""

    def test_second_load_still_empty(self, tmp_path):
        store = JsonStore(tmp_path / "nope.json")
        store.load_raw()
        assert store.load_raw() == {}

    def test_load_raw_empty_file(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("")
        assert JsonStore(path).load_raw() == {}

    def test_load_raw_whitespace_file(self, tmp_path):
        path = tmp_path / "blank.json"
        path.write_text("  \n")
        assert JsonStore(path).load_raw() == {}

    def test_load_raw_corrupt_json_raises(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("not valid json{{{")
        with pytest.raises(ConfigParseError):
            JsonStore(path).load_raw()

    def test_load_raw_invalid_utf8_raises(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_bytes(b'{"a": "\xff"}')
        with pytest.raises(ConfigParseError, match="cannot parse"):
            JsonStore(path).load_raw()

    def test_load_raw_missing_parent_raises(self, tmp_path):
        store = JsonStore(tmp_path / "missing" / "store.json")
        with pytest.raises(ConfigIOError, match="cannot load config"):
            store.load_raw()

    def test_ensure_dir_creates_parents(self, tmp_path):
        path = tmp_path / "deep" / "nested" / "store.json"
        store = JsonStore(path)
        store.ensure_dir()
        assert path.parent.is_dir()
        assert store.load_raw() == {}

    def test_ensure_dir_existing_is_noop(self, tmp_path):
        store = JsonStore(tmp_path / "store.json")
        store.ensure_dir()
        store.ensure_dir()
        assert tmp_path.is_dir()

    def test_ensure_dir_blocked_by_file_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        store = JsonStore(blocker / "store.json")
        with pytest.raises(ConfigIOError, match="cannot create config directory"):
            store.ensure_dir()

    def test_save_and_load_raw_dict(self, tmp_path):
        store = JsonStore(tmp_path / "data.json")
        store.save_raw({"key": "value"})
        assert store.load_raw() == {"key": "value"}

    def test_save_sets_file_mode(self, tmp_path):
        path = tmp_path / "data.json"
        JsonStore(path).save_raw({"key": "value"})
        assert stat.S_IMODE(path.stat().st_mode) == 0o755

    def test_save_unencodable_raises(self, tmp_path):
        path = tmp_path / "data.json"
        store = JsonStore(path)
        with pytest.raises(ConfigSerializeError):
            store.save_raw({"key": object()})
        assert not path.exists()

    def test_save_into_missing_dir_raises(self, tmp_path):
        store = JsonStore(tmp_path / "missing" / "data.json")
        with pytest.raises(ConfigIOError, match="cannot write config"):
            store.save_raw({"key": "value"})

    def test_default_returns_dict(self):
        store = JsonStore.__new__(JsonStore)
        assert store._default() == {}


# ---------------------------------------------------------------------------
# CommandStore
# ---------------------------------------------------------------------------


class TestCommandStore:
    def test_load_empty(self, store):
        data = store.load()
        assert isinstance(data, dict)
        assert data == {}

    def test_round_trip(self, store):
        aliases = {"up": "brew update && brew upgrade", "gs": "git status | less"}
        store.save(aliases)
        assert store.load() == aliases

    def test_round_trip_unicode(self, store):
        aliases = {"hallo": "echo 'grüß dich'", "空": ""}
        store.save(aliases)
        assert store.load() == aliases

    def test_save_sorts_keys(self, store):
        store.save({"zzz": "last", "aaa": "first"})
        raw = json.loads(store.path.read_text())
        keys = list(raw.keys())
        assert keys == sorted(keys)

    def test_reads_compact_json(self, store):
        """Files written by other tools (e.g. without indentation) load fine."""
        store.path.write_text('{"a":"echo hi","bb":"ls"}')
        assert store.load() == {"a": "echo hi", "bb": "ls"}

    def test_non_object_raises(self, store):
        store.path.write_text('["echo hi"]')
        with pytest.raises(ConfigParseError, match="JSON object"):
            store.load()

    def test_non_string_value_raises(self, store):
        store.path.write_text('{"a": 1}')
        with pytest.raises(ConfigParseError, match="'a'"):
            store.load()

    def test_get_known(self, populated_store):
        assert populated_store.get("bb") == "ls"

    def test_get_unknown_raises(self, populated_store):
        with pytest.raises(UnknownAliasError) as exc_info:
            populated_store.get("nope")
        assert exc_info.value.name == "nope"
        assert "nope is not set in config" in str(exc_info.value)
