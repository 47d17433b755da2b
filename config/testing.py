SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

STORAGE_BACKEND = "memory"
STORAGE_PATH = None

DB_CONFIG = {}
AUTO_INIT_DB = False

WORK_START_TIME = "11:30"
WORK_END_TIME = "17:00"
LATE_THRESHOLD = 15
OVERTIME_THRESHOLD = 1
APPLY_LATE_THRESHOLD = False
