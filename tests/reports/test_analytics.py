from __future__ import annotations

from datetime import date, datetime, timedelta

from attendance_tracker.attendance.model import AttendanceRecord
from attendance_tracker.core.enums import AttendanceStatus, UserType
from attendance_tracker.reports.analytics import (
    aggregate,
    daily_trend,
    department_stats,
    departments,
    filter_records,
    overall_stats,
    percentage,
    status_distribution,
    user_type_stats,
)
from attendance_tracker.reports.date_range import DateRange
from attendance_tracker.users.roster import default_users


def make_record(
    rid: str,
    *,
    day: date,
    department: str = "Engineering",
    user_type: UserType = UserType.EMPLOYEE,
    status: AttendanceStatus = AttendanceStatus.PRESENT,
    is_late: bool = False,
    duration=None,
) -> AttendanceRecord:
    check_in = datetime.combine(day, datetime.min.time()) + timedelta(hours=9)
    return AttendanceRecord(
        id=rid,
        user_id=rid,
        user_name=f"User {rid}",
        user_type=user_type,
        department=department,
        check_in_time=check_in,
        check_out_time=check_in + timedelta(minutes=duration) if duration is not None else None,
        date=day,
        status=status,
        is_late=is_late,
        duration=duration,
    )


def test_percentage_guards_empty_bucket():
    assert percentage(0, 0) == "N/A"
    assert percentage(1, 3) == 33
    assert percentage(1, 2) == 50
    assert percentage(2, 3) == 67


def test_filter_records_by_range_department_and_type():
    records = [
        make_record("a", day=date(2026, 2, 1)),
        make_record("b", day=date(2026, 2, 7), department="Sales"),
        make_record("c", day=date(2026, 2, 8)),
        make_record("d", day=date(2026, 2, 3), user_type=UserType.STUDENT),
    ]
    week = DateRange(date(2026, 2, 1), date(2026, 2, 7))

    assert [r.id for r in filter_records(records, week)] == ["a", "b", "d"]
    assert [r.id for r in filter_records(records, week, "Sales")] == ["b"]
    assert [r.id for r in filter_records(records, week, user_type="student")] == ["d"]
    assert filter_records(records, week, "Finance") == []


def test_departments_first_seen_order():
    records = [
        make_record("a", day=date(2026, 2, 1), department="Sales"),
        make_record("b", day=date(2026, 2, 1), department="HR"),
        make_record("c", day=date(2026, 2, 1), department="Sales"),
    ]
    assert departments(records) == ["Sales", "HR"]


def test_daily_trend_keeps_last_fourteen_days_ascending():
    start = date(2026, 1, 1)
    records = [make_record(str(i), day=start + timedelta(days=i), is_late=i % 2 == 0) for i in range(20)]

    trend = daily_trend(list(reversed(records)))

    assert len(trend) == 14
    assert trend[0]["date"] == "2026-01-07"
    assert trend[-1]["date"] == "2026-01-20"
    assert trend[-1] == {"date": "2026-01-20", "total": 1, "late": 0, "onTime": 1}


def test_department_stats_seeded_from_roster():
    records = [
        make_record("a", day=date(2026, 2, 2), department="Engineering"),
        make_record("b", day=date(2026, 2, 2), department="Engineering", is_late=True, status=AttendanceStatus.LATE),
        make_record("c", day=date(2026, 2, 2), department="Unknown"),
    ]

    stats = {s["dept"]: s for s in department_stats(records, default_users())}

    assert set(stats) == {"Engineering", "Marketing", "Sales", "Computer Science", "HR", "Business"}
    assert stats["Engineering"] == {
        "dept": "Engineering",
        "total": 2,
        "present": 1,
        "late": 1,
        "absent": 0,
        "attendanceRate": 50,
    }
    assert stats["Marketing"]["attendanceRate"] == "N/A"


def test_status_distribution_drops_empty_buckets():
    records = [
        make_record("a", day=date(2026, 2, 2)),
        make_record("b", day=date(2026, 2, 2), status=AttendanceStatus.OVERTIME),
        make_record("c", day=date(2026, 2, 2), status=AttendanceStatus.OVERTIME),
    ]

    assert status_distribution(records) == [
        {"name": "Present", "status": "present", "value": 1},
        {"name": "Overtime", "status": "overtime", "value": 2},
    ]


def test_user_type_stats_reports_na_for_missing_type():
    records = [
        make_record("a", day=date(2026, 2, 2)),
        make_record("b", day=date(2026, 2, 2), is_late=True),
    ]

    employees, students = user_type_stats(records)

    assert employees == {"type": "Employee", "count": 2, "onTime": 1, "late": 1, "onTimeRate": 50}
    assert students["onTimeRate"] == "N/A"


def test_overall_stats_ignores_open_sessions_in_average():
    records = [
        make_record("a", day=date(2026, 2, 2), duration=480),
        make_record("b", day=date(2026, 2, 2), duration=421, is_late=True),
        make_record("c", day=date(2026, 2, 2), status=AttendanceStatus.OVERTIME, duration=None),
    ]

    assert overall_stats(records) == {
        "totalRecords": 3,
        "lateArrivals": 1,
        "overtime": 1,
        "avgDuration": 451,
        "latePercentage": 33,
    }


def test_aggregate_over_no_records():
    result = aggregate([], [])

    assert result.daily_trend == []
    assert result.department_stats == []
    assert result.status_distribution == []
    assert result.overall_stats == {
        "totalRecords": 0,
        "lateArrivals": 0,
        "overtime": 0,
        "avgDuration": 0,
        "latePercentage": "N/A",
    }
    assert set(result.to_dict()) == {
        "dailyTrend",
        "departmentStats",
        "statusDistribution",
        "userTypeStats",
        "overallStats",
    }


def test_absent_records_are_not_charted_or_counted_as_absent():
    records = [
        make_record("a", day=date(2026, 2, 2), status=AttendanceStatus.ABSENT),
        make_record("b", day=date(2026, 2, 2), status=AttendanceStatus.LATE, is_late=True),
    ]

    assert status_distribution(records) == [{"name": "Late", "status": "late", "value": 1}]

    (eng,) = department_stats(records)
    assert eng["absent"] == 0
    assert eng["present"] == 1
    assert eng["late"] == 1
