from __future__ import annotations

import importlib
import logging
from datetime import datetime
from typing import Callable, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .alerts.controller import register as register_alerts
from .attendance.controller import register as register_attendance
from .common.datetime_utils import now_local
from .container import build_container
from .database.bootstrap import apply_schema
from .database.connection import DBConfig
from .reports.controller import register as register_reports
from .storage.base import KeyValueStorage
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(
    settings_module: Optional[str] = None,
    *,
    storage: Optional[KeyValueStorage] = None,
    clock: Callable[[], datetime] = now_local,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    backend = str(getattr(settings, "STORAGE_BACKEND", "memory")).lower()
    if storage is None and backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(DBConfig.from_mapping(getattr(settings, "DB_CONFIG", {})))
        logger.info("MySQL key-value schema ready")

    container = build_container(settings=settings, storage=storage, clock=clock)
    app.extensions["attendance_container"] = container
    logger.info("settings=%s storage=%s", settings_module, backend if storage is None else type(storage).__name__)

    register_attendance(app, container)
    register_users(app, container)
    register_alerts(app, container)
    register_reports(app, container)

    return app
