import json
import shutil

import pytest

from fridge.infra.Json_Store import InMemoryStore, JsonFileStore
from fridge.utilities.exceptions import PersistenceWriteError


def test_put_persists_whole_document(tmp_path):
    path = tmp_path / "store.json"
    store = JsonFileStore(path)
    store.put("egg,onion", [{"id": 1, "title": "Omelette", "image": ""}])
    store.put("rice", [])

    with open(path, encoding="utf-8") as f:
        on_disk = json.load(f)
    assert on_disk == {"egg,onion": [{"id": 1, "title": "Omelette", "image": ""}], "rice": []}
    assert JsonFileStore(path).get("rice") == []


def test_missing_file_is_empty(tmp_path):
    store = JsonFileStore(tmp_path / "nested" / "absent.json")
    assert store.items() == []
    assert store.get("anything") is None


def test_corrupt_file_is_ignored(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")
    assert JsonFileStore(path).items() == []


def test_unicode_keys_round_trip(tmp_path):
    path = tmp_path / "overrides.json"
    JsonFileStore(path).put("חזה עוף", "chicken breast")
    assert "חזה עוף" in path.read_text(encoding="utf-8")
    assert JsonFileStore(path).get("חזה עוף") == "chicken breast"


def test_failed_write_keeps_previous_state(tmp_path, monkeypatch):
    path = tmp_path / "store.json"
    store = JsonFileStore(path)
    store.put("onion", [{"id": 1, "title": "Soup", "image": ""}])
    before = path.read_text(encoding="utf-8")

    def broken_move(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(shutil, "move", broken_move)
    with pytest.raises(PersistenceWriteError):
        store.put("onion", [{"id": 2, "title": "Pie", "image": ""}])
    with pytest.raises(PersistenceWriteError):
        store.clear()

    assert store.get("onion") == [{"id": 1, "title": "Soup", "image": ""}]
    assert path.read_text(encoding="utf-8") == before
    assert [p.name for p in tmp_path.iterdir()] == ["store.json"]


def test_returned_values_are_copies(tmp_path):
    for store in (InMemoryStore(), JsonFileStore(tmp_path / "store.json")):
        value = [{"id": 1}]
        store.put("k", value)
        value.append({"id": 2})
        store.get("k").append({"id": 3})
        assert store.get("k") == [{"id": 1}]


def test_delete_and_clear():
    store = InMemoryStore({"a": 1, "b": 2})
    assert store.delete("a") is True
    assert store.delete("a") is False
    store.clear()
    assert store.items() == []
