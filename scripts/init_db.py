from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from attendance_tracker.database.bootstrap import KV_TABLE, apply_schema
from attendance_tracker.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_mapping(getattr(settings, "DB_CONFIG", {}) or {})

    apply_schema(config)
    print(f"OK: {KV_TABLE} ready -> {config.user}@{config.host}:{config.port}/{config.database}")


if __name__ == "__main__":
    main()
