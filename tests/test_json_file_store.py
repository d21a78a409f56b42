"""Tests for the JSON file key-value store."""

import json
from pathlib import Path

from smart_chef.adapters.json_file_store import JsonFileKeyValueStore
from smart_chef.domain.profile import UserProfile
from smart_chef.services.profile import ProfileStore
from tests.conftest import make_recipe


def test_set_get_delete(tmp_path: Path) -> None:
    store = JsonFileKeyValueStore.create(str(tmp_path / "nested" / "state.json"))

    assert store.get("profile") is None
    store.set("profile", '{"a": 1}')
    store.set("other", "value")

    assert store.get("profile") == '{"a": 1}'
    assert json.loads((tmp_path / "nested" / "state.json").read_text()) == {
        "profile": '{"a": 1}',
        "other": "value",
    }

    store.delete("profile")
    assert store.get("profile") is None
    assert store.get("other") == "value"


def test_unreadable_file_is_treated_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    path.write_text("garbage")
    store = JsonFileKeyValueStore(path=path)

    assert store.get("profile") is None
    store.set("profile", "{}")
    assert store.get("profile") == "{}"


def test_profile_survives_process_restart(tmp_path: Path) -> None:
    path = str(tmp_path / "profile.json")
    first = ProfileStore(JsonFileKeyValueStore.create(path))
    first.load()
    first.toggle_favorite(make_recipe("a"))
    first.set_saved_restrictions("gluten free")

    second = ProfileStore(JsonFileKeyValueStore.create(path))

    assert second.load() == first.profile
    assert second.profile != UserProfile()
