"""Tests for loading the static cache key list."""

import json

import pytest

from cacheworker import KeyFileError, load_cache_keys


class TestLoadCacheKeys:
    """Tests for load_cache_keys."""

    def test_loads_keys_in_order(self, tmp_path) -> None:
        path = tmp_path / "cache-keys.json"
        path.write_text(json.dumps(["de.serlo.org/api/uuid/2", "de.serlo.org/api/uuid/1"]))

        assert load_cache_keys(path) == [
            "de.serlo.org/api/uuid/2",
            "de.serlo.org/api/uuid/1",
        ]

    def test_drops_repeated_keys(self, tmp_path) -> None:
        path = tmp_path / "cache-keys.json"
        path.write_text(json.dumps(["a", "b", "a"]))

        assert load_cache_keys(str(path)) == ["a", "b"]

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(KeyFileError, match="Cannot read"):
            load_cache_keys(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "cache-keys.json"
        path.write_text("[\"a\",")

        with pytest.raises(KeyFileError, match="not valid JSON"):
            load_cache_keys(path)

    def test_not_a_list(self, tmp_path) -> None:
        path = tmp_path / "cache-keys.json"
        path.write_text(json.dumps({"keys": ["a"]}))

        with pytest.raises(KeyFileError, match="JSON array"):
            load_cache_keys(path)

    def test_non_string_entry(self, tmp_path) -> None:
        path = tmp_path / "cache-keys.json"
        path.write_text(json.dumps(["a", 2]))

        with pytest.raises(KeyFileError, match="entry 1 is int"):
            load_cache_keys(path)
