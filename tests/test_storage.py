"""Key-value backends: get/set/delete and persistence across instances."""

import sys
from pathlib import Path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from storage import JsonFileStore, MemoryStore, SqliteStore


def _exercise(store):
    assert store.get("missing") is None
    store.set("k", "v1")
    assert store.get("k") == "v1"
    store.set("k", "가방")
    assert store.get("k") == "가방"
    store.delete("k")
    assert store.get("k") is None
    store.delete("k")


@pytest.mark.parametrize("kind", ["memory", "json", "sqlite"])
def test_basic_operations(kind, tmp_path):
    if kind == "memory":
        store = MemoryStore()
    elif kind == "json":
        store = JsonFileStore(tmp_path / "store.json")
    else:
        store = SqliteStore(tmp_path / "store.db")
    try:
        _exercise(store)
    finally:
        store.close()


def test_json_store_persists(tmp_path):
    path = tmp_path / "nested" / "store.json"
    JsonFileStore(path).set("kkomaentle-mode", "endless")
    assert JsonFileStore(path).get("kkomaentle-mode") == "endless"


def test_json_store_unreadable_file_starts_empty(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonFileStore(path)
    assert store.get("anything") is None
    store.set("a", "b")
    assert JsonFileStore(path).get("a") == "b"


def test_sqlite_store_persists(tmp_path):
    path = tmp_path / "store.db"
    first = SqliteStore(path)
    first.set("kkomaentle-stats", '{"totalGuesses": 1}')
    first.close()
    second = SqliteStore(path)
    assert second.get("kkomaentle-stats") == '{"totalGuesses": 1}'
    second.close()
