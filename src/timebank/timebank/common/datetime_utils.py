from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterator
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date.

    ISO timestamps are accepted too; only the date part is used.
    """
    raw = (value or "").strip().split("T")[0]
    try:
        return datetime.strptime(raw, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def now_local(tz_name: str) -> datetime:
    """Current wall-clock time in the organization's zone, without tzinfo.

    Note: Wrapped so tests can patch/mocked easier.
    """
    try:
        tz = ZoneInfo(tz_name)
    except ZoneInfoNotFoundError:
        raise ValidationError(f"Unknown time zone: {tz_name!r}")
    return datetime.now(tz).replace(tzinfo=None)


def as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day of the closed range [start, end]."""
    cursor = start
    while cursor <= end:
        yield cursor
        cursor += timedelta(days=1)


def day_bounds(day: date) -> tuple[datetime, datetime]:
    return datetime.combine(day, time.min), datetime.combine(day, time.max)


def first_day_of_month(day: date) -> date:
    return day.replace(day=1)
