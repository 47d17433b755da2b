from __future__ import annotations

import math
from datetime import date, datetime, time
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def parse_hhmm(value: str) -> Optional[time]:
    """Parse a 24h ``HH:MM`` setting, returning None when malformed."""
    try:
        return datetime.strptime((value or "").strip(), "%H:%M").time()
    except (TypeError, ValueError):
        return None


def at_time(day: date, hhmm: str) -> Optional[datetime]:
    """Apply an ``HH:MM`` setting to a calendar day."""
    t = parse_hhmm(hhmm)
    if t is None:
        return None
    return datetime.combine(day, t)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end, rounded half-up (may be negative)."""
    return round_half_up((end - start).total_seconds() / 60)


def format_time(value: datetime) -> str:
    return value.strftime("%I:%M:%S %p")


def format_short_time(value: datetime) -> str:
    return value.strftime("%I:%M %p")


def format_date(value: date) -> str:
    return f"{value.strftime('%b')} {value.day}, {value.year}"


def format_duration(start: datetime, end: Optional[datetime]) -> str:
    if end is None:
        return "-"
    seconds = int((end - start).total_seconds())
    hours, rest = divmod(max(seconds, 0), 3600)
    return f"{hours}h {rest // 60}m"


def to_millis(value: datetime) -> datetime:
    """Drop sub-millisecond precision, matching what ``to_timestamp`` stores."""
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def to_timestamp(value: datetime) -> str:
    return value.isoformat(timespec="milliseconds")


def parse_timestamp(value: str) -> datetime:
    """Parse a stored ISO timestamp into a naive local datetime.

    Offsets (including a trailing ``Z``) are converted to local time.
    """
    raw = value.strip()
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    dt = datetime.fromisoformat(raw)
    if dt.tzinfo is not None:
        dt = dt.astimezone().replace(tzinfo=None)
    return dt
