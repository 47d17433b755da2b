from __future__ import annotations

from abc import ABC
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.enums import AlertType, AttendanceStatus


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    is_late: bool = False
    alert: Optional[AlertType] = None


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide an attendance status.

    Check-in moves a record into {present, late}; check-out either keeps
    that status or moves it to {overtime, early-departure}. The defaults
    below are the "nothing special happened" transitions.
    """

    def decide_checkin(self, *, now: datetime) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)

    def decide_checkout(self, *, now: datetime, current: AttendanceStatus) -> StatusDecision:
        return StatusDecision(status=current)
