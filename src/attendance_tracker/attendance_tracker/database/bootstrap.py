from __future__ import annotations

import mysql.connector

from .connection import DBConfig

KV_TABLE = "kv_store"

KV_SCHEMA = f"""
CREATE TABLE IF NOT EXISTS {KV_TABLE} (
    storage_key VARCHAR(64) NOT NULL PRIMARY KEY,
    storage_value LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
) CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci
"""


def ensure_database_exists(config: DBConfig) -> None:
    conn = mysql.connector.connect(
        host=config.host,
        port=config.port,
        user=config.user,
        password=config.password,
        use_pure=True,
    )
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(config: DBConfig) -> None:
    """Create the database and the key-value table (idempotent)."""
    ensure_database_exists(config)

    conn = mysql.connector.connect(
        host=config.host,
        port=config.port,
        user=config.user,
        password=config.password,
        database=config.database,
        use_pure=True,
    )
    try:
        cur = conn.cursor()
        cur.execute(KV_SCHEMA)
        conn.commit()
    finally:
        conn.close()
