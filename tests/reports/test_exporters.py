from __future__ import annotations

import csv
import io
import json
from datetime import date, datetime

import pytest

from attendance_tracker.attendance.model import AttendanceRecord
from attendance_tracker.core.enums import AttendanceStatus, ReportType, UserType
from attendance_tracker.reports.date_range import DateRange
from attendance_tracker.reports.exporters.csv_exporter import CSV_HEADERS, CsvReportExporter
from attendance_tracker.reports.exporters.html_exporter import HtmlReportExporter
from attendance_tracker.reports.exporters.json_exporter import JsonReportExporter
from attendance_tracker.reports.model import ReportData


@pytest.fixture
def report() -> ReportData:
    closed = AttendanceRecord(
        id="r1",
        user_id="1",
        user_name="John Smith",
        user_type=UserType.EMPLOYEE,
        department="Engineering",
        check_in_time=datetime(2026, 2, 4, 11, 45),
        check_out_time=datetime(2026, 2, 4, 18, 45),
        date=date(2026, 2, 4),
        status=AttendanceStatus.OVERTIME,
        is_late=True,
        duration=420,
    )
    open_ = AttendanceRecord(
        id="r2",
        user_id="4",
        user_name='Emma "E" Davis, Jr',
        user_type=UserType.STUDENT,
        department="Computer Science",
        check_in_time=datetime(2026, 2, 5, 9, 0),
        check_out_time=None,
        date=date(2026, 2, 5),
        status=AttendanceStatus.PRESENT,
        is_late=False,
    )
    return ReportData(
        report_type=ReportType.WEEKLY,
        date_range=DateRange(date(2026, 2, 1), date(2026, 2, 7)),
        department="all",
        records=[closed, open_],
        generated_at=datetime(2026, 2, 7, 20, 0),
    )


def test_csv_has_header_and_one_quoted_row_per_record(report):
    text = CsvReportExporter().render(report)

    lines = text.splitlines()
    assert lines[0] == ",".join(f'"{h}"' for h in CSV_HEADERS)
    assert lines[1] == (
        '"2026-02-04","John Smith","employee","Engineering",'
        '"11:45:00 AM","06:45:00 PM","420","overtime","Yes"'
    )

    rows = list(csv.reader(io.StringIO(text)))
    assert len(rows) == 1 + len(report.records)
    assert rows[2] == [
        "2026-02-05",
        'Emma "E" Davis, Jr',
        "student",
        "Computer Science",
        "09:00:00 AM",
        "No",
        "0",
        "present",
        "No",
    ]


def test_csv_for_empty_report_is_header_only(report):
    empty = ReportData(
        report_type=report.report_type,
        date_range=report.date_range,
        department="Finance",
        records=[],
        generated_at=report.generated_at,
    )

    assert CsvReportExporter().render(empty).splitlines() == [",".join(f'"{h}"' for h in CSV_HEADERS)]


def test_json_payload(report):
    payload = json.loads(JsonReportExporter().render(report))

    assert payload["reportDate"] == "2026-02-07T20:00:00.000"
    assert payload["reportType"] == "weekly"
    assert payload["dateRange"] == {"start": "2026-02-01", "end": "2026-02-07"}
    assert payload["department"] == "all"
    assert payload["totalRecords"] == len(payload["records"]) == 2
    assert payload["records"][0]["checkOutTime"] == "2026-02-04T18:45:00.000"
    assert payload["records"][1]["checkOutTime"] is None


def test_exports_are_deterministic(report):
    for exporter in (CsvReportExporter(), JsonReportExporter(), HtmlReportExporter()):
        assert exporter.render(report) == exporter.render(report)


def test_html_report_lists_every_record(report):
    html = HtmlReportExporter().render(report)

    assert "<h1>Attendance Report</h1>" in html
    assert "John Smith" in html
    assert "Emma &#34;E&#34; Davis, Jr" in html
    assert "2026-02-01 to 2026-02-07" in html
    assert "11:45:00 AM" in html
    assert html.count("<tr>") == 1 + len(report.records)


def test_filenames_follow_format(report):
    assert CsvReportExporter().filename(report) == "attendance-report.csv"
    assert JsonReportExporter().filename(report) == "attendance-report.json"
    assert HtmlReportExporter().media_type == "text/html"
