from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from .strategies.base import AttendanceStrategy
from .strategies.early_strategy import EarlyDepartureStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy
from .strategies.overtime_strategy import OvertimeStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_checkin(self, *, now: datetime, work_start: Optional[datetime], grace_minutes: int = 0) -> AttendanceStrategy:
        if work_start is None:
            return NormalStrategy()

        if now > work_start + timedelta(minutes=grace_minutes):
            return LateStrategy()
        return NormalStrategy()

    def for_checkout(self, *, now: datetime, work_end: Optional[datetime], overtime_threshold_hours: float) -> AttendanceStrategy:
        if work_end is None:
            return NormalStrategy()

        # Order matters: overtime, then early departure, then unchanged.
        if now > work_end:
            hours_past = (now - work_end).total_seconds() / 3600
            if hours_past >= overtime_threshold_hours:
                return OvertimeStrategy()
            return NormalStrategy()
        if now < work_end:
            return EarlyDepartureStrategy()
        return NormalStrategy()
