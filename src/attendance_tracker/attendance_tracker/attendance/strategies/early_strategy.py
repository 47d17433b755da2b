from __future__ import annotations

from datetime import datetime

from ...core.enums import AlertType, AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class EarlyDepartureStrategy(AttendanceStrategy):
    """Check-out before the end of the work day."""

    def decide_checkout(self, *, now: datetime, current: AttendanceStatus) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.EARLY_DEPARTURE, alert=AlertType.EARLY_DEPARTURE)
