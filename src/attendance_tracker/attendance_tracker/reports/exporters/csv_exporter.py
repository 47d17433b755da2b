from __future__ import annotations

import csv
import io

from ...common.datetime_utils import format_time
from ..model import ReportData
from .base import ReportExporter

CSV_HEADERS = [
    "Date",
    "Name",
    "Type",
    "Department",
    "Check-In Time",
    "Check-Out Time",
    "Duration (mins)",
    "Status",
    "Late",
]


class CsvReportExporter(ReportExporter):
    """Header row, then one fully quoted row per record."""

    media_type = "text/csv"
    extension = "csv"

    def render(self, report: ReportData) -> str:
        out = io.StringIO()
        writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(CSV_HEADERS)
        for r in report.records:
            writer.writerow(
                [
                    r.date.strftime("%Y-%m-%d"),
                    r.user_name,
                    r.user_type.value,
                    r.department,
                    format_time(r.check_in_time),
                    format_time(r.check_out_time) if r.check_out_time else "No",
                    r.duration or 0,
                    r.status.value,
                    "Yes" if r.is_late else "No",
                ]
            )
        return out.getvalue()
