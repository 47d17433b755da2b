from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class OvertimeStrategy(AttendanceStrategy):
    """Check-out at least the overtime threshold past the end of the work day.

    No alert: overtime is reported through analytics only.
    """

    def decide_checkout(self, *, now: datetime, current: AttendanceStatus) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.OVERTIME)
