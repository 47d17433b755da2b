from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.constants import (
    DEFAULT_LATE_THRESHOLD_MINUTES,
    DEFAULT_OVERTIME_THRESHOLD_HOURS,
    DEFAULT_WORK_END_TIME,
    DEFAULT_WORK_START_TIME,
)


@dataclass(frozen=True)
class AttendanceSettings:
    """Work-hour thresholds consulted by the rule engine.

    ``late_threshold`` is only applied as a grace window when
    ``apply_late_threshold`` is set; by default lateness is a strict
    comparison against ``work_start_time``.
    """

    work_start_time: str = DEFAULT_WORK_START_TIME
    work_end_time: str = DEFAULT_WORK_END_TIME
    late_threshold: int = DEFAULT_LATE_THRESHOLD_MINUTES
    overtime_threshold: float = DEFAULT_OVERTIME_THRESHOLD_HOURS
    apply_late_threshold: bool = False

    @property
    def grace_minutes(self) -> int:
        return int(self.late_threshold) if self.apply_late_threshold else 0

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "AttendanceSettings":
        return cls(
            work_start_time=str(values.get("WORK_START_TIME", DEFAULT_WORK_START_TIME)),
            work_end_time=str(values.get("WORK_END_TIME", DEFAULT_WORK_END_TIME)),
            late_threshold=int(values.get("LATE_THRESHOLD", DEFAULT_LATE_THRESHOLD_MINUTES)),
            overtime_threshold=float(values.get("OVERTIME_THRESHOLD", DEFAULT_OVERTIME_THRESHOLD_HOURS)),
            apply_late_threshold=bool(values.get("APPLY_LATE_THRESHOLD", False)),
        )

    @classmethod
    def from_settings(cls, settings: Any) -> "AttendanceSettings":
        """Build from a config module (``config.development`` etc.)."""
        keys = ("WORK_START_TIME", "WORK_END_TIME", "LATE_THRESHOLD", "OVERTIME_THRESHOLD", "APPLY_LATE_THRESHOLD")
        return cls.from_mapping({k: getattr(settings, k) for k in keys if hasattr(settings, k)})

    def to_dict(self) -> dict:
        return {
            "workStartTime": self.work_start_time,
            "workEndTime": self.work_end_time,
            "lateThreshold": self.late_threshold,
            "overtimeThreshold": self.overtime_threshold,
        }
