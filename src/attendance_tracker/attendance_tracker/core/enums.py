from __future__ import annotations

from enum import Enum


class UserType(str, Enum):
    """Kind of person being tracked."""

    EMPLOYEE = "employee"
    STUDENT = "student"


class Role(str, Enum):
    """Roster role. Informational only, nothing is enforced on it."""

    USER = "user"
    MANAGER = "manager"
    ADMIN = "admin"


class AttendanceStatus(str, Enum):
    """Status stored on each attendance record."""

    PRESENT = "present"
    LATE = "late"
    OVERTIME = "overtime"
    EARLY_DEPARTURE = "early-departure"
    ABSENT = "absent"


class AlertType(str, Enum):
    LATE = "late"
    ABSENT = "absent"
    OVERTIME = "overtime"
    EARLY_DEPARTURE = "early-departure"


class ReportType(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    CUSTOM = "custom"
