"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

RECORDS_KEY = "attendance_records"
USERS_KEY = "attendance_users"
ALERTS_KEY = "attendance_alerts"

DEFAULT_WORK_START_TIME = "11:30"
DEFAULT_WORK_END_TIME = "17:00"
DEFAULT_LATE_THRESHOLD_MINUTES = 15
DEFAULT_OVERTIME_THRESHOLD_HOURS = 1

ALL = "all"

DAILY_TREND_DAYS = 14
ANALYTICS_WINDOWS = {"7d": 7, "30d": 30, "90d": 90}
DEFAULT_ANALYTICS_WINDOW = "30d"
