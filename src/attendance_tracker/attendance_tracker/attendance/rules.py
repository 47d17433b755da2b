"""Attendance rule engine.

Pure functions turning a check-in or check-out event plus the configured
work-hour thresholds into a status classification and an optional alert.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import at_time, minutes_between
from ..core.enums import AlertType, AttendanceStatus
from .factory import AttendanceStrategyFactory

logger = logging.getLogger(__name__)

_default_factory = AttendanceStrategyFactory()


@dataclass(frozen=True)
class CheckInResult:
    is_late: bool
    status: AttendanceStatus
    alert: Optional[AlertType] = None


@dataclass(frozen=True)
class CheckOutResult:
    duration: int
    status: AttendanceStatus
    alert: Optional[AlertType] = None


def classify_check_in(
    now: datetime,
    work_start_time: str,
    *,
    grace_minutes: int = 0,
    factory: Optional[AttendanceStrategyFactory] = None,
) -> CheckInResult:
    """Late when ``now`` is strictly after work start (plus grace) on the same day."""
    work_start = at_time(now.date(), work_start_time)
    if work_start is None:
        logger.warning("Malformed work start time %r; treating check-in as on time", work_start_time)

    strategy = (factory or _default_factory).for_checkin(now=now, work_start=work_start, grace_minutes=grace_minutes)
    decision = strategy.decide_checkin(now=now)
    return CheckInResult(is_late=decision.is_late, status=decision.status, alert=decision.alert)


def classify_check_out(
    check_in_time: datetime,
    check_out_time: datetime,
    work_end_time: str,
    overtime_threshold_hours: float,
    *,
    current_status: AttendanceStatus = AttendanceStatus.PRESENT,
    factory: Optional[AttendanceStrategyFactory] = None,
) -> CheckOutResult:
    """Duration plus the (possibly unchanged) status after check-out.

    A check-out earlier than the check-in yields a duration of 0.
    """
    duration = minutes_between(check_in_time, check_out_time)
    if duration < 0:
        logger.warning("Check-out %s precedes check-in %s; clamping duration to 0", check_out_time, check_in_time)
        duration = 0

    work_end = at_time(check_out_time.date(), work_end_time)
    if work_end is None:
        logger.warning("Malformed work end time %r; keeping status %s", work_end_time, current_status.value)

    strategy = (factory or _default_factory).for_checkout(
        now=check_out_time,
        work_end=work_end,
        overtime_threshold_hours=overtime_threshold_hours,
    )
    decision = strategy.decide_checkout(now=check_out_time, current=current_status)
    return CheckOutResult(duration=duration, status=decision.status, alert=decision.alert)
