from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Dict, Optional

from ..common.datetime_utils import now_local
from ..core.constants import ALL, DEFAULT_ANALYTICS_WINDOW
from ..core.enums import ReportType
from ..core.exceptions import ValidationError
from ..store import AttendanceStore
from .analytics import Analytics, aggregate, departments, filter_records
from .date_range import analytics_window, resolve_date_range
from .exporters.base import ReportExporter
from .exporters.csv_exporter import CsvReportExporter
from .exporters.html_exporter import HtmlReportExporter
from .exporters.json_exporter import JsonReportExporter
from .model import ReportData


class ReportService:
    """Reads the store's collections for reports, analytics and exports."""

    def __init__(
        self,
        store: AttendanceStore,
        *,
        exporters: Optional[Dict[str, ReportExporter]] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._store = store
        self._clock = clock
        self._exporters = exporters or {
            "csv": CsvReportExporter(),
            "json": JsonReportExporter(),
            "html": HtmlReportExporter(),
        }

    def build_report(
        self,
        *,
        report_type: ReportType | str = ReportType.MONTHLY,
        reference_date: Optional[date] = None,
        department: str = ALL,
        start: Optional[date] = None,
        end: Optional[date] = None,
        generated_at: Optional[datetime] = None,
    ) -> ReportData:
        generated_at = generated_at or self._clock()
        reference_date = reference_date or generated_at.date()
        date_range = resolve_date_range(report_type, reference_date, start=start, end=end)

        rows = filter_records(self._store.get_records(), date_range, department or ALL)
        return ReportData(
            report_type=ReportType(report_type),
            date_range=date_range,
            department=department or ALL,
            records=rows,
            generated_at=generated_at,
        )

    def departments(self):
        return departments(self._store.get_records())

    def analytics(self, *, range_key: str = DEFAULT_ANALYTICS_WINDOW, today: Optional[date] = None) -> Analytics:
        today = today or self._clock().date()
        rows = filter_records(self._store.get_records(), analytics_window(range_key, today))
        return aggregate(rows, self._store.get_users())

    def exporter(self, fmt: str) -> ReportExporter:
        try:
            return self._exporters[fmt]
        except KeyError:
            raise ValidationError(f"Unsupported export format: {fmt}")

    def export(self, report: ReportData, fmt: str) -> str:
        return self.exporter(fmt).render(report)
