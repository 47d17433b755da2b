from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, List, Optional

from ..alerts.service import AlertService
from ..common.datetime_utils import format_date, format_duration, format_short_time, format_time, now_local, to_millis
from ..common.ids import new_id
from ..core.constants import ALL
from ..core.enums import AlertType, AttendanceStatus
from ..storage.collection import Collection
from ..users.model import User
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord, GeoPoint
from .rules import classify_check_in, classify_check_out
from .settings import AttendanceSettings

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        records: Collection[AttendanceRecord],
        alerts: AlertService,
        *,
        settings: Optional[AttendanceSettings] = None,
        strategy_factory: Optional[AttendanceStrategyFactory] = None,
        clock: Callable[[], datetime] = now_local,
        id_factory: Callable[[], str] = new_id,
    ):
        self._records = records
        self._alerts = alerts
        self._settings = settings or AttendanceSettings()
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._clock = clock
        self._new_id = id_factory

    @property
    def settings(self) -> AttendanceSettings:
        return self._settings

    def check_in(self, user: User, *, now: Optional[datetime] = None, location: Optional[GeoPoint] = None) -> AttendanceRecord:
        """Open today's session for ``user``, or return the one already open."""
        now = to_millis(now or self._clock())
        today = now.date()

        records = self._records.load()
        existing = next((r for r in records if r.user_id == user.id and r.date == today and r.is_open), None)
        if existing:
            logger.debug("User %s already checked in today (record %s)", user.id, existing.id)
            return existing

        decision = classify_check_in(
            now,
            self._settings.work_start_time,
            grace_minutes=self._settings.grace_minutes,
            factory=self._factory,
        )

        record = AttendanceRecord(
            id=self._new_id(),
            user_id=user.id,
            user_name=user.name,
            user_type=user.type,
            department=user.department,
            check_in_time=now,
            check_out_time=None,
            date=today,
            status=decision.status,
            is_late=decision.is_late,
            check_in_location=location,
        )
        records.append(record)
        self._records.save(records)
        logger.debug("Check-in %s for user %s: %s", record.id, user.id, record.status.value)

        if decision.alert == AlertType.LATE:
            self._alerts.create_alert(user.id, AlertType.LATE, f"Marked as late at {format_time(now)}", now=now)

        return record

    def check_out(
        self,
        user_id: str,
        record_id: str,
        *,
        now: Optional[datetime] = None,
        location: Optional[GeoPoint] = None,
    ) -> Optional[AttendanceRecord]:
        """Close a session. Returns None when the record does not exist for this user.

        A record that is already closed comes back unchanged: status and
        duration are only ever set by the first check-out.
        """
        now = to_millis(now or self._clock())

        records = self._records.load()
        idx = next((i for i, r in enumerate(records) if r.id == str(record_id)), None)
        if idx is None:
            return None

        record = records[idx]
        if record.user_id != str(user_id):
            logger.warning("Record %s belongs to user %s, not %s", record.id, record.user_id, user_id)
            return None
        if not record.is_open:
            return record

        decision = classify_check_out(
            record.check_in_time,
            now,
            self._settings.work_end_time,
            self._settings.overtime_threshold,
            current_status=record.status,
            factory=self._factory,
        )

        updated = replace(
            record,
            check_out_time=now,
            duration=decision.duration,
            status=decision.status,
            check_out_location=location,
        )
        records[idx] = updated
        self._records.save(records)
        logger.debug("Check-out %s for user %s: %s (%d min)", record.id, user_id, updated.status.value, decision.duration)

        if decision.alert == AlertType.EARLY_DEPARTURE:
            self._alerts.create_alert(user_id, AlertType.EARLY_DEPARTURE, f"Left early at {format_time(now)}", now=now)

        return updated

    def get_records(self) -> List[AttendanceRecord]:
        return self._records.load()

    def get_record(self, record_id: str) -> Optional[AttendanceRecord]:
        return next((r for r in self._records.load() if r.id == str(record_id)), None)

    def get_user_records(self, user_id: str) -> List[AttendanceRecord]:
        return [r for r in self._records.load() if r.user_id == str(user_id)]

    def get_today_session(self, user_id: str, *, today: Optional[date] = None) -> Optional[AttendanceRecord]:
        today = today or self._clock().date()
        return next(
            (r for r in self._records.load() if r.user_id == str(user_id) and r.date == today and r.is_open),
            None,
        )

    def get_history(self, *, user_id: Optional[str] = None, user_type: str = ALL) -> List[AttendanceRecord]:
        """Records newest first, optionally narrowed to one user or user type."""
        rows = self._records.load()
        if user_id is not None:
            rows = [r for r in rows if r.user_id == str(user_id)]
        if user_type and user_type != ALL:
            rows = [r for r in rows if r.user_type.value == user_type]
        rows.sort(key=lambda r: r.check_in_time, reverse=True)
        return rows

    def dashboard_stats(self, *, user_type: str = ALL) -> dict:
        rows = self.get_history(user_type=user_type)
        return {
            "total": len(rows),
            "checkedIn": sum(1 for r in rows if r.is_open),
            "checkedOut": sum(1 for r in rows if not r.is_open),
        }

    def get_history_ui(self, user_id: str, *, limit: int = 15) -> List[dict]:
        rows = self.get_history(user_id=user_id)[:limit]
        return [self._to_ui(r) for r in rows]

    def delete_record(self, record_id: str) -> bool:
        records = self._records.load()
        remaining = [r for r in records if r.id != str(record_id)]
        if len(remaining) == len(records):
            return False
        self._records.save(remaining)
        logger.info("Deleted record %s", record_id)
        return True

    def reset(self) -> None:
        self._records.clear()

    def _to_ui(self, r: AttendanceRecord) -> dict:
        label = {
            AttendanceStatus.PRESENT: "Present",
            AttendanceStatus.LATE: "Late",
            AttendanceStatus.OVERTIME: "Overtime",
            AttendanceStatus.EARLY_DEPARTURE: "Early Departure",
            AttendanceStatus.ABSENT: "Absent",
        }.get(r.status, r.status.value)

        css = {
            AttendanceStatus.PRESENT: "bg-success",
            AttendanceStatus.LATE: "bg-danger",
            AttendanceStatus.OVERTIME: "bg-warning text-dark",
            AttendanceStatus.EARLY_DEPARTURE: "bg-info text-dark",
            AttendanceStatus.ABSENT: "bg-secondary",
        }.get(r.status, "bg-secondary")

        return {
            "id": r.id,
            "date": format_date(r.date),
            "check_in": format_short_time(r.check_in_time),
            "check_out": format_short_time(r.check_out_time) if r.check_out_time else "-",
            "duration": format_duration(r.check_in_time, r.check_out_time),
            "status": label,
            "css_class": css,
        }
