from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List

from ..attendance.model import AttendanceRecord
from ..core.enums import ReportType
from .date_range import DateRange


@dataclass(frozen=True)
class ReportData:
    """Filtered records plus the parameters that produced them."""

    report_type: ReportType
    date_range: DateRange
    department: str
    records: List[AttendanceRecord]
    generated_at: datetime

    @property
    def summary(self) -> dict:
        return {
            "totalRecords": len(self.records),
            "lateCount": sum(1 for r in self.records if r.is_late),
            "presentCount": sum(1 for r in self.records if r.status.value == "present"),
            "overtimeCount": sum(1 for r in self.records if r.status.value == "overtime"),
        }
