from __future__ import annotations

import itertools
from datetime import datetime

import pytest

from attendance_tracker.attendance.settings import AttendanceSettings
from attendance_tracker.storage.memory import InMemoryStorage
from attendance_tracker.store import AttendanceStore


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday, 15 minutes after the default 11:30 work start
    return datetime(2026, 2, 4, 11, 45, 0)


@pytest.fixture
def sequential_ids():
    counter = itertools.count(1)
    return lambda: f"id{next(counter)}"


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def store(storage, fixed_now, sequential_ids) -> AttendanceStore:
    return AttendanceStore(
        storage,
        settings=AttendanceSettings(work_start_time="11:30", work_end_time="17:00", overtime_threshold=1),
        clock=lambda: fixed_now,
        id_factory=sequential_ids,
    )
