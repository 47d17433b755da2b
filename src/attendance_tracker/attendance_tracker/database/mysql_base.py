from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Optional, Sequence

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection):
    """One short-lived connection per operation: commit on success, rollback on error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=True)
        try:
            yield cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetch_value(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any], column: str) -> Optional[Any]:
    with db_cursor(conn_factory) as cur:
        cur.execute(sql, tuple(params))
        row = cur.fetchone()
    return row[column] if row else None


def execute(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any]) -> int:
    with db_cursor(conn_factory) as cur:
        cur.execute(sql, tuple(params))
        return cur.rowcount
