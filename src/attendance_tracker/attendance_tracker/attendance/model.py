from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_date, parse_timestamp, to_timestamp
from ..core.enums import AttendanceStatus, UserType


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lng: float

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lng": self.lng}

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Optional["GeoPoint"]:
        if not data:
            return None
        return cls(lat=float(data["lat"]), lng=float(data["lng"]))


@dataclass(frozen=True)
class AttendanceRecord:
    """One check-in/check-out session.

    ``user_name``, ``user_type`` and ``department`` are a snapshot taken at
    check-in; they are not re-synced when the user changes later.
    """

    id: str
    user_id: str
    user_name: str
    user_type: UserType
    department: str
    check_in_time: datetime
    check_out_time: Optional[datetime]
    date: date
    status: AttendanceStatus
    is_late: bool
    duration: Optional[int] = None
    check_in_location: Optional[GeoPoint] = None
    check_out_location: Optional[GeoPoint] = None

    @property
    def is_open(self) -> bool:
        return self.check_out_time is None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "userId": self.user_id,
            "userName": self.user_name,
            "userType": self.user_type.value,
            "department": self.department,
            "checkInTime": to_timestamp(self.check_in_time),
            "checkOutTime": to_timestamp(self.check_out_time) if self.check_out_time else None,
            "date": self.date.strftime("%Y-%m-%d"),
            "status": self.status.value,
            "isLate": self.is_late,
        }
        if self.duration is not None:
            data["duration"] = self.duration
        if self.check_in_location:
            data["checkInLocation"] = self.check_in_location.to_dict()
        if self.check_out_location:
            data["checkOutLocation"] = self.check_out_location.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        check_out = data.get("checkOutTime")
        duration = data.get("duration")
        return cls(
            id=str(data["id"]),
            user_id=str(data["userId"]),
            user_name=str(data.get("userName", "")),
            user_type=UserType(data.get("userType", UserType.EMPLOYEE.value)),
            department=str(data.get("department", "")),
            check_in_time=parse_timestamp(data["checkInTime"]),
            check_out_time=parse_timestamp(check_out) if check_out else None,
            date=parse_iso_date(data["date"]),
            status=AttendanceStatus(data["status"]),
            is_late=bool(data.get("isLate", False)),
            duration=int(duration) if duration is not None else None,
            check_in_location=GeoPoint.from_dict(data.get("checkInLocation")),
            check_out_location=GeoPoint.from_dict(data.get("checkOutLocation")),
        )
