from __future__ import annotations

import json
from datetime import datetime

import pytest

from attendance_tracker.core.exceptions import StorageUnavailableError
from attendance_tracker.storage.json_file import JsonFileStorage
from attendance_tracker.store import AttendanceStore


def test_set_get_remove(tmp_path):
    storage = JsonFileStorage(tmp_path / "nested" / "store.json")

    assert storage.get("a") is None
    storage.set("a", "[1]")
    storage.set("b", "[]")
    storage.remove("a")
    storage.remove("missing")

    assert storage.get("a") is None
    assert storage.get("b") == "[]"
    assert json.loads(storage.path.read_text(encoding="utf-8")) == {"b": "[]"}


def test_corrupt_file_raises_unavailable(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("[oops", encoding="utf-8")

    with pytest.raises(StorageUnavailableError):
        JsonFileStorage(path).get("attendance_records")


def test_store_survives_restart_on_disk(tmp_path):
    path = tmp_path / "store.json"
    now = datetime(2026, 2, 4, 11, 0)

    first = AttendanceStore(JsonFileStorage(path), clock=lambda: now)
    record = first.check_in(first.get_user("1"), now=now)

    second = AttendanceStore(JsonFileStorage(path), clock=lambda: now)
    assert second.get_records() == [record]


def test_store_over_corrupt_file_reads_empty(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("not json at all", encoding="utf-8")

    store = AttendanceStore(JsonFileStorage(path))

    assert store.get_records() == []
    assert store.get_users() == []
