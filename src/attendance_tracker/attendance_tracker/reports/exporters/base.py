from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import ReportData


class ReportExporter(ABC):
    """Exporter interface (Strategy Pattern for report formats)."""

    media_type: str = "text/plain"
    extension: str = "txt"

    @abstractmethod
    def render(self, report: ReportData) -> str:
        raise NotImplementedError

    def filename(self, report: ReportData) -> str:
        return f"attendance-report.{self.extension}"
