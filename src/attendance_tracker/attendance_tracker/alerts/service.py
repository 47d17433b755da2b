from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Dict, Iterable, List, Optional

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_date, now_local, to_millis
from ..common.ids import new_id
from ..core.constants import ALL
from ..core.enums import AlertType
from ..storage.collection import Collection
from ..users.model import User
from .model import AlertNotification

logger = logging.getLogger(__name__)


class AlertService:
    """Alert notifications derived from check-in/out outcomes and absence scans."""

    def __init__(
        self,
        alerts: Collection[AlertNotification],
        *,
        clock: Callable[[], datetime] = now_local,
        id_factory: Callable[[], str] = new_id,
    ):
        self._alerts = alerts
        self._clock = clock
        self._new_id = id_factory

    def create_alert(
        self,
        user_id: str,
        alert_type: AlertType,
        message: str,
        *,
        now: Optional[datetime] = None,
    ) -> AlertNotification:
        alert = AlertNotification(
            id=self._new_id(),
            user_id=str(user_id),
            type=AlertType(alert_type),
            message=message,
            timestamp=to_millis(now or self._clock()),
            read=False,
        )
        alerts = self._alerts.load()
        alerts.append(alert)
        self._alerts.save(alerts)
        logger.info("Alert %s for user %s: %s", alert.type.value, alert.user_id, message)
        return alert

    def get_alerts(self, user_id: Optional[str] = None, alert_type: str = ALL) -> List[AlertNotification]:
        alerts = self._alerts.load()
        if user_id is not None:
            alerts = [a for a in alerts if a.user_id == str(user_id)]
        if alert_type and alert_type != ALL:
            alerts = [a for a in alerts if a.type.value == alert_type]
        return alerts

    def unread_count(self, user_id: Optional[str] = None) -> int:
        return sum(1 for a in self.get_alerts(user_id) if not a.read)

    def type_counts(self) -> Dict[str, int]:
        counts = {t.value: 0 for t in AlertType}
        for a in self._alerts.load():
            counts[a.type.value] += 1
        return counts

    def mark_read(self, alert_id: str) -> bool:
        """Flip one alert to read. Unknown or already-read ids are a no-op."""
        alerts = self._alerts.load()
        for i, a in enumerate(alerts):
            if a.id == str(alert_id):
                if a.read:
                    return False
                alerts[i] = replace(a, read=True)
                self._alerts.save(alerts)
                return True
        return False

    def mark_all_read(self, user_id: Optional[str] = None) -> int:
        alerts = self._alerts.load()
        flipped = 0
        for i, a in enumerate(alerts):
            if a.read or (user_id is not None and a.user_id != str(user_id)):
                continue
            alerts[i] = replace(a, read=True)
            flipped += 1
        if flipped:
            self._alerts.save(alerts)
        return flipped

    def generate_absence_alerts(
        self,
        users: Iterable[User],
        records: Iterable[AttendanceRecord],
        today: Optional[date] = None,
        *,
        now: Optional[datetime] = None,
    ) -> List[AlertNotification]:
        """Create one ``absent`` alert per user without a record dated ``today``.

        Users who already have an ``absent`` alert stamped ``today`` (read or
        not) are skipped, so the scan can be re-run any number of times.
        """
        now = to_millis(now or self._clock())
        today = today or now.date()

        alerts = self._alerts.load()
        present = {r.user_id for r in records if r.date == today}
        already = {a.user_id for a in alerts if a.type == AlertType.ABSENT and a.timestamp.date() == today}

        when = "today" if today == now.date() else f"on {format_date(today)}"
        created: List[AlertNotification] = []
        for user in users:
            if user.id in present or user.id in already:
                continue
            alert = AlertNotification(
                id=self._new_id(),
                user_id=user.id,
                type=AlertType.ABSENT,
                message=f"{user.name} did not check in {when}",
                timestamp=now if now.date() == today else datetime.combine(today, now.time()),
                read=False,
            )
            alerts.append(alert)
            created.append(alert)
            already.add(user.id)

        if created:
            self._alerts.save(alerts)
        logger.info("Absence scan for %s created %d alerts", today, len(created))
        return created

    def reset(self) -> None:
        self._alerts.clear()
