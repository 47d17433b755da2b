from __future__ import annotations

from .base import AttendanceStrategy


class NormalStrategy(AttendanceStrategy):
    """On-time check-in, check-out that keeps the check-in status."""
