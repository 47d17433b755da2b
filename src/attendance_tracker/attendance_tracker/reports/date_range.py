from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..core.constants import ANALYTICS_WINDOWS
from ..core.enums import ReportType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    def __contains__(self, day: date) -> bool:
        return self.start <= day <= self.end

    def to_dict(self) -> dict:
        return {"start": self.start.strftime("%Y-%m-%d"), "end": self.end.strftime("%Y-%m-%d")}


def resolve_date_range(
    report_type: ReportType | str,
    reference_date: date,
    *,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> DateRange:
    """Date window covered by a report.

    Weeks start on Sunday. ``custom`` passes ``start``/``end`` through.
    """
    try:
        report_type = ReportType(report_type)
    except ValueError:
        raise ValidationError(f"Unknown report type: {report_type}")

    if report_type == ReportType.DAILY:
        return DateRange(reference_date, reference_date)

    if report_type == ReportType.WEEKLY:
        # date.weekday(): Monday=0 .. Sunday=6
        week_start = reference_date - timedelta(days=(reference_date.weekday() + 1) % 7)
        return DateRange(week_start, week_start + timedelta(days=6))

    if report_type == ReportType.MONTHLY:
        last_day = calendar.monthrange(reference_date.year, reference_date.month)[1]
        return DateRange(reference_date.replace(day=1), reference_date.replace(day=last_day))

    if start is None or end is None:
        raise ValidationError("Custom reports need both a start and an end date")
    if end < start:
        raise ValidationError("End date must be on or after start date")
    return DateRange(start, end)


def analytics_window(range_key: str, today: date) -> DateRange:
    """Trailing window for the analytics dashboard (``7d``, ``30d``, ``90d``)."""
    days = ANALYTICS_WINDOWS.get(range_key)
    if days is None:
        raise ValidationError(f"Unknown analytics range: {range_key}")
    return DateRange(today - timedelta(days=days), today)
