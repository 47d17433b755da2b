import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql")
STORAGE_PATH = os.getenv("STORAGE_PATH", "instance/attendance_store.json")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker"),
}

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

WORK_START_TIME = os.getenv("WORK_START_TIME", "11:30")
WORK_END_TIME = os.getenv("WORK_END_TIME", "17:00")
LATE_THRESHOLD = int(os.getenv("LATE_THRESHOLD", "15"))
OVERTIME_THRESHOLD = float(os.getenv("OVERTIME_THRESHOLD", "1"))
APPLY_LATE_THRESHOLD = bool(int(os.getenv("APPLY_LATE_THRESHOLD", "0")))
