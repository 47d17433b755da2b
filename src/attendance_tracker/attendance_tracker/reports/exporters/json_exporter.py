from __future__ import annotations

import json

from ...common.datetime_utils import to_timestamp
from ..model import ReportData
from .base import ReportExporter


class JsonReportExporter(ReportExporter):
    media_type = "application/json"
    extension = "json"

    def to_payload(self, report: ReportData) -> dict:
        return {
            "reportDate": to_timestamp(report.generated_at),
            "reportType": report.report_type.value,
            "dateRange": report.date_range.to_dict(),
            "department": report.department,
            "totalRecords": len(report.records),
            "records": [r.to_dict() for r in report.records],
        }

    def render(self, report: ReportData) -> str:
        return json.dumps(self.to_payload(report), indent=2, ensure_ascii=False)
