from __future__ import annotations

from jinja2 import Environment, PackageLoader, select_autoescape

from ...common.datetime_utils import format_time
from ..model import ReportData
from .base import ReportExporter


class HtmlReportExporter(ReportExporter):
    """Printable report: summary block and a table. Visual only."""

    media_type = "text/html"
    extension = "html"

    def __init__(self, env: Environment | None = None):
        self._env = env or Environment(
            loader=PackageLoader("attendance_tracker", "templates"),
            autoescape=select_autoescape(["html"]),
        )
        self._env.filters.setdefault("clock", format_time)

    def render(self, report: ReportData) -> str:
        template = self._env.get_template("report.html")
        return template.render(report=report, summary=report.summary, date_range=report.date_range.to_dict())
