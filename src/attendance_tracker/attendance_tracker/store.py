"""Record store: the single object a session talks to.

Holds the three persisted collections (users, attendance records, alerts)
and exposes every store operation as a method. Mutations run one at a time
under a re-entrant lock because each is a full-collection
read-modify-write against the medium.
"""

from __future__ import annotations

import threading
from datetime import date, datetime
from functools import wraps
from typing import Callable, List, Optional, Tuple

from .alerts.model import AlertNotification
from .alerts.service import AlertService
from .attendance.factory import AttendanceStrategyFactory
from .attendance.model import AttendanceRecord, GeoPoint
from .attendance.service import AttendanceService
from .attendance.settings import AttendanceSettings
from .common.datetime_utils import now_local
from .common.ids import new_id
from .core.constants import ALERTS_KEY, ALL, RECORDS_KEY, USERS_KEY
from .core.enums import AlertType
from .storage.base import KeyValueStorage
from .storage.collection import Collection
from .users.model import User
from .users.roster import default_users
from .users.service import UserService


def _serialized(method):
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper


class AttendanceStore:
    def __init__(
        self,
        storage: Optional[KeyValueStorage],
        *,
        settings: Optional[AttendanceSettings] = None,
        clock: Callable[[], datetime] = now_local,
        id_factory: Callable[[], str] = new_id,
        strategy_factory: Optional[AttendanceStrategyFactory] = None,
    ):
        self._lock = threading.RLock()
        self._clock = clock

        users = Collection(storage, USERS_KEY, decode=User.from_dict, encode=User.to_dict, default_factory=default_users)
        records = Collection(storage, RECORDS_KEY, decode=AttendanceRecord.from_dict, encode=AttendanceRecord.to_dict)
        alerts = Collection(storage, ALERTS_KEY, decode=AlertNotification.from_dict, encode=AlertNotification.to_dict)

        self.alerts = AlertService(alerts, clock=clock, id_factory=id_factory)
        self.users = UserService(users, id_factory=id_factory)
        self.attendance = AttendanceService(
            records,
            self.alerts,
            settings=settings,
            strategy_factory=strategy_factory,
            clock=clock,
            id_factory=id_factory,
        )

    @property
    def settings(self) -> AttendanceSettings:
        return self.attendance.settings

    # ----- attendance -----

    @_serialized
    def check_in(self, user: User, *, now: Optional[datetime] = None, location: Optional[GeoPoint] = None) -> AttendanceRecord:
        return self.attendance.check_in(user, now=now, location=location)

    @_serialized
    def check_in_user(self, user_id: str, *, now: Optional[datetime] = None, location: Optional[GeoPoint] = None) -> Optional[AttendanceRecord]:
        """Check in by id; None when the user is not on the roster."""
        user = self.users.get_user(user_id)
        if not user:
            return None
        return self.attendance.check_in(user, now=now, location=location)

    @_serialized
    def check_out(
        self,
        user_id: str,
        record_id: str,
        *,
        now: Optional[datetime] = None,
        location: Optional[GeoPoint] = None,
    ) -> Optional[AttendanceRecord]:
        return self.attendance.check_out(user_id, record_id, now=now, location=location)

    @_serialized
    def toggle_session(self, user_id: str, *, now: Optional[datetime] = None) -> Tuple[str, Optional[AttendanceRecord]]:
        """Check out if a session is open today, otherwise check in.

        Returns ``("check-out" | "check-in", record)``; the record is None for
        an unknown user.
        """
        now = now or self._clock()
        session = self.attendance.get_today_session(user_id, today=now.date())
        if session:
            return "check-out", self.attendance.check_out(user_id, session.id, now=now)
        return "check-in", self.check_in_user(user_id, now=now)

    def get_records(self) -> List[AttendanceRecord]:
        return self.attendance.get_records()

    def get_user_records(self, user_id: str) -> List[AttendanceRecord]:
        return self.attendance.get_user_records(user_id)

    def get_today_session(self, user_id: str, *, today: Optional[date] = None) -> Optional[AttendanceRecord]:
        return self.attendance.get_today_session(user_id, today=today)

    def get_history(self, *, user_id: Optional[str] = None, user_type: str = ALL) -> List[AttendanceRecord]:
        return self.attendance.get_history(user_id=user_id, user_type=user_type)

    @_serialized
    def delete_record(self, record_id: str) -> bool:
        return self.attendance.delete_record(record_id)

    # ----- users -----

    def get_users(self) -> List[User]:
        return self.users.get_users()

    def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get_user(user_id)

    @_serialized
    def add_user(self, user: User) -> bool:
        return self.users.add_user(user)

    @_serialized
    def create_user(self, **fields) -> User:
        return self.users.create_user(**fields)

    @_serialized
    def bulk_import(self, text: str) -> List[User]:
        return self.users.bulk_import(text)

    @_serialized
    def delete_user(self, user_id: str) -> bool:
        return self.users.delete_user(user_id)

    # ----- alerts -----

    @_serialized
    def create_alert(self, user_id: str, alert_type: AlertType, message: str) -> AlertNotification:
        return self.alerts.create_alert(user_id, alert_type, message)

    def get_alerts(self, user_id: Optional[str] = None, alert_type: str = ALL) -> List[AlertNotification]:
        return self.alerts.get_alerts(user_id, alert_type)

    @_serialized
    def mark_alert_read(self, alert_id: str) -> bool:
        return self.alerts.mark_read(alert_id)

    @_serialized
    def mark_all_alerts_read(self, user_id: Optional[str] = None) -> int:
        return self.alerts.mark_all_read(user_id)

    @_serialized
    def generate_absence_alerts(self, *, today: Optional[date] = None, now: Optional[datetime] = None) -> List[AlertNotification]:
        now = now or self._clock()
        return self.alerts.generate_absence_alerts(
            self.users.get_users(),
            self.attendance.get_records(),
            today or now.date(),
            now=now,
        )

    # ----- maintenance -----

    @_serialized
    def clear_all(self) -> None:
        """Wipe records, users and alerts; the default roster comes back."""
        self.attendance.reset()
        self.users.reset()
        self.alerts.reset()
