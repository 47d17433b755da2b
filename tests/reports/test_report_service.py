from __future__ import annotations

from datetime import date, datetime

import pytest

from attendance_tracker.core.enums import ReportType
from attendance_tracker.core.exceptions import ValidationError
from attendance_tracker.reports.service import ReportService


@pytest.fixture
def seeded(store):
    store.check_in(store.get_user("1"), now=datetime(2026, 1, 31, 11, 0))
    store.check_in(store.get_user("2"), now=datetime(2026, 2, 2, 11, 45))
    r = store.check_in(store.get_user("3"), now=datetime(2026, 2, 4, 11, 0))
    store.check_out("3", r.id, now=datetime(2026, 2, 4, 18, 30))
    store.check_in(store.get_user("4"), now=datetime(2026, 2, 4, 11, 10))
    return store


def test_weekly_report_uses_sunday_week(seeded, fixed_now):
    service = ReportService(seeded, clock=lambda: fixed_now)

    report = service.build_report(report_type="weekly")

    assert report.report_type == ReportType.WEEKLY
    assert report.date_range.to_dict() == {"start": "2026-02-01", "end": "2026-02-07"}
    assert sorted(r.user_id for r in report.records) == ["2", "3", "4"]
    assert report.summary == {"totalRecords": 3, "lateCount": 1, "presentCount": 1, "overtimeCount": 1}
    assert report.generated_at == fixed_now


def test_report_filters_by_department(seeded, fixed_now):
    service = ReportService(seeded, clock=lambda: fixed_now)

    report = service.build_report(report_type="monthly", reference_date=date(2026, 2, 10), department="Sales")

    assert [r.user_name for r in report.records] == ["Mike Wilson"]
    assert report.department == "Sales"


def test_custom_report_needs_bounds(seeded, fixed_now):
    service = ReportService(seeded, clock=lambda: fixed_now)

    with pytest.raises(ValidationError):
        service.build_report(report_type="custom", start=date(2026, 2, 1))

    report = service.build_report(report_type="custom", start=date(2026, 1, 1), end=date(2026, 1, 31))
    assert [r.user_id for r in report.records] == ["1"]


def test_export_unknown_format_is_rejected(seeded, fixed_now):
    service = ReportService(seeded, clock=lambda: fixed_now)
    report = service.build_report()

    with pytest.raises(ValidationError, match="Unsupported export format"):
        service.export(report, "xlsx")
    assert service.export(report, "csv").startswith('"Date","Name"')


def test_analytics_uses_trailing_window_and_roster(seeded, fixed_now):
    service = ReportService(seeded, clock=lambda: fixed_now)

    analytics = service.analytics(range_key="7d")

    assert analytics.overall_stats["totalRecords"] == 4
    assert analytics.overall_stats["lateArrivals"] == 1
    assert analytics.overall_stats["overtime"] == 1
    assert analytics.overall_stats["avgDuration"] == 450
    depts = {d["dept"]: d for d in analytics.department_stats}
    assert depts["HR"]["attendanceRate"] == "N/A"
    assert depts["Sales"]["attendanceRate"] == 100


def test_departments_come_from_records(seeded, fixed_now):
    service = ReportService(seeded, clock=lambda: fixed_now)

    assert service.departments() == ["Engineering", "Marketing", "Sales", "Computer Science"]
