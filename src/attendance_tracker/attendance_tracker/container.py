from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

from .attendance.settings import AttendanceSettings
from .common.datetime_utils import now_local
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import ReportService
from .storage.base import KeyValueStorage
from .storage.json_file import JsonFileStorage
from .storage.memory import InMemoryStorage
from .storage.mysql_storage import MySQLKeyValueStorage
from .store import AttendanceStore


@dataclass(frozen=True)
class Container:
    storage: Optional[KeyValueStorage]
    settings: AttendanceSettings

    store: AttendanceStore
    report_service: ReportService


def build_storage(settings: Any) -> Optional[KeyValueStorage]:
    """Pick the key-value medium named by ``STORAGE_BACKEND``.

    ``none`` yields no medium at all: reads come back empty and writes are
    dropped.
    """
    backend = str(getattr(settings, "STORAGE_BACKEND", "memory")).lower()
    if backend == "memory":
        return InMemoryStorage()
    if backend == "json":
        return JsonFileStorage(getattr(settings, "STORAGE_PATH", None) or "attendance_store.json")
    if backend == "mysql":
        config = DBConfig.from_mapping(getattr(settings, "DB_CONFIG", {}) or {})
        return MySQLKeyValueStorage(DatabaseConnection.get_instance(config))
    if backend == "none":
        return None
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend}")


def build_container(
    *,
    settings: Any,
    storage: Optional[KeyValueStorage] = None,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    if storage is None:
        storage = build_storage(settings)
    attendance_settings = AttendanceSettings.from_settings(settings)

    store = AttendanceStore(storage, settings=attendance_settings, clock=clock)
    report_service = ReportService(store, clock=clock)

    return Container(
        storage=storage,
        settings=attendance_settings,
        store=store,
        report_service=report_service,
    )
