from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.exceptions import StorageUnavailableError
from ..database.bootstrap import KV_TABLE
from ..database.connection import DatabaseConnection
from ..database.mysql_base import execute, fetch_value

_SELECT = f"SELECT storage_value FROM {KV_TABLE} WHERE storage_key=%s"
_UPSERT = f"""
INSERT INTO {KV_TABLE}(storage_key, storage_value)
VALUES(%s,%s)
ON DUPLICATE KEY UPDATE storage_value=VALUES(storage_value)
"""
_DELETE = f"DELETE FROM {KV_TABLE} WHERE storage_key=%s"


class MySQLKeyValueStorage:
    """Key-value blobs in a single MySQL table (see ``database.bootstrap``)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[str]:
        try:
            value = fetch_value(self._conn_factory, _SELECT, (key,), "storage_value")
        except mysql.connector.Error as e:
            raise StorageUnavailableError(f"MySQL read failed for {key}: {e}") from e
        return str(value) if value is not None else None

    def set(self, key: str, value: str) -> None:
        try:
            execute(self._conn_factory, _UPSERT, (key, value))
        except mysql.connector.Error as e:
            raise StorageUnavailableError(f"MySQL write failed for {key}: {e}") from e

    def remove(self, key: str) -> None:
        try:
            execute(self._conn_factory, _DELETE, (key,))
        except mysql.connector.Error as e:
            raise StorageUnavailableError(f"MySQL delete failed for {key}: {e}") from e
