"""Groupings and counts over attendance records.

Everything here is a pure function of its arguments.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Union

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import round_half_up
from ..core.constants import ALL, DAILY_TREND_DAYS
from ..core.enums import AttendanceStatus, UserType
from ..users.model import User
from .date_range import DateRange

# Chart slices; absences are tracked through alerts, not records.
STATUS_LABELS = {
    AttendanceStatus.PRESENT: "Present",
    AttendanceStatus.LATE: "Late",
    AttendanceStatus.OVERTIME: "Overtime",
    AttendanceStatus.EARLY_DEPARTURE: "Early Departure",
}


def percentage(part: int, total: int) -> Union[int, str]:
    """Whole-number percentage, or ``"N/A"`` for an empty bucket."""
    if total <= 0:
        return "N/A"
    return round_half_up(part / total * 100)


def filter_records(
    records: Iterable[AttendanceRecord],
    date_range: DateRange,
    department: str = ALL,
    user_type: str = ALL,
) -> List[AttendanceRecord]:
    """Records dated inside the (inclusive) range; ``"all"`` matches anything."""
    out = []
    for r in records:
        if r.date not in date_range:
            continue
        if department and department != ALL and r.department != department:
            continue
        if user_type and user_type != ALL and r.user_type.value != user_type:
            continue
        out.append(r)
    return out


def departments(records: Iterable[AttendanceRecord]) -> List[str]:
    """Distinct departments in first-seen order."""
    seen: List[str] = []
    for r in records:
        if r.department and r.department not in seen:
            seen.append(r.department)
    return seen


@dataclass(frozen=True)
class Analytics:
    daily_trend: List[dict] = field(default_factory=list)
    department_stats: List[dict] = field(default_factory=list)
    status_distribution: List[dict] = field(default_factory=list)
    user_type_stats: List[dict] = field(default_factory=list)
    overall_stats: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "dailyTrend": self.daily_trend,
            "departmentStats": self.department_stats,
            "statusDistribution": self.status_distribution,
            "userTypeStats": self.user_type_stats,
            "overallStats": self.overall_stats,
        }


def daily_trend(records: Sequence[AttendanceRecord], *, days: int = DAILY_TREND_DAYS) -> List[dict]:
    by_day: dict = {}
    for r in records:
        d = by_day.setdefault(r.date, {"date": r.date.strftime("%Y-%m-%d"), "total": 0, "late": 0, "onTime": 0})
        d["total"] += 1
        if r.is_late:
            d["late"] += 1
        else:
            d["onTime"] += 1
    return [by_day[k] for k in sorted(by_day)][-days:]


def department_stats(records: Sequence[AttendanceRecord], users: Optional[Sequence[User]] = None) -> List[dict]:
    # Buckets come from the roster when given, so departments with no
    # records still show up; records for unknown departments are ignored.
    if users is not None:
        names = []
        for u in users:
            if u.department not in names:
                names.append(u.department)
    else:
        names = departments(records)

    stats = {n: {"dept": n, "total": 0, "present": 0, "late": 0, "absent": 0} for n in names}
    for r in records:
        s = stats.get(r.department)
        if s is None:
            continue
        s["total"] += 1
        if r.is_late:
            s["late"] += 1
        else:
            s["present"] += 1

    out = []
    for s in stats.values():
        out.append({**s, "attendanceRate": percentage(s["present"], s["total"])})
    return out


def status_distribution(records: Sequence[AttendanceRecord]) -> List[dict]:
    counts = {status: 0 for status in STATUS_LABELS}
    for r in records:
        if r.status in counts:
            counts[r.status] += 1
    return [
        {"name": STATUS_LABELS[status], "status": status.value, "value": n}
        for status, n in counts.items()
        if n > 0
    ]


def user_type_stats(records: Sequence[AttendanceRecord]) -> List[dict]:
    stats = {
        t: {"type": t.value.capitalize(), "count": 0, "onTime": 0, "late": 0}
        for t in UserType
    }
    for r in records:
        s = stats[r.user_type]
        s["count"] += 1
        if r.is_late:
            s["late"] += 1
        else:
            s["onTime"] += 1
    return [{**s, "onTimeRate": percentage(s["onTime"], s["count"])} for s in stats.values()]


def overall_stats(records: Sequence[AttendanceRecord]) -> dict:
    total = len(records)
    late = sum(1 for r in records if r.is_late)
    durations = [r.duration for r in records if r.duration]
    avg = round_half_up(sum(durations) / len(durations)) if durations else 0
    return {
        "totalRecords": total,
        "lateArrivals": late,
        "overtime": sum(1 for r in records if r.status == AttendanceStatus.OVERTIME),
        "avgDuration": avg,
        "latePercentage": percentage(late, total),
    }


def aggregate(records: Sequence[AttendanceRecord], users: Optional[Sequence[User]] = None) -> Analytics:
    records = list(records)
    return Analytics(
        daily_trend=daily_trend(records),
        department_stats=department_stats(records, users),
        status_distribution=status_distribution(records),
        user_type_stats=user_type_stats(records),
        overall_stats=overall_stats(records),
    )
