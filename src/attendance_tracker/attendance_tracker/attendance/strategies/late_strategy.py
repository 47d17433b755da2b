from __future__ import annotations

from datetime import datetime

from ...core.enums import AlertType, AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late check-in."""

    def decide_checkin(self, *, now: datetime) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE, is_late=True, alert=AlertType.LATE)
