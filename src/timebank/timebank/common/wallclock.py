"""Local wall-clock values.

Punch timestamps are stored in a container that nominally represents UTC but
actually carries the organization's local clock digits. Reading them through a
timezone-aware type would shift them by the zone offset, so the ledger works
with ``LocalWallClock`` instead: the raw year/month/day/hour/minute/second
fields, already in the organization's zone, never converted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

_TEXT_FORMATS = ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M")


@dataclass(frozen=True, order=True)
class LocalWallClock:
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    microsecond: int = 0

    @classmethod
    def from_stored(cls, value: datetime) -> "LocalWallClock":
        """Read the raw fields of a stored timestamp, ignoring any tzinfo."""
        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            microsecond=value.microsecond,
        )

    @classmethod
    def combine(cls, day: date, at: time) -> "LocalWallClock":
        return cls.from_stored(datetime.combine(day, at))

    @classmethod
    def parse(cls, value: str) -> "LocalWallClock":
        """Parse ``YYYY-MM-DD HH:MM[:SS]`` or an ISO-8601 timestamp.

        A trailing ``Z`` or UTC offset is dropped, not applied.
        """
        raw = (value or "").strip()
        for fmt in _TEXT_FORMATS:
            try:
                return cls.from_stored(datetime.strptime(raw, fmt))
            except ValueError:
                continue

        if raw.endswith(("Z", "z")):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            raise ValueError(f"Invalid wall-clock value: {value!r}")
        return cls.from_stored(parsed)

    def format(self) -> str:
        return self.as_naive().strftime("%Y-%m-%d %H:%M:%S")

    def __str__(self) -> str:
        return self.format()

    def as_naive(self) -> datetime:
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second, self.microsecond)

    def date(self) -> date:
        return date(self.year, self.month, self.day)

    def time(self) -> time:
        return time(self.hour, self.minute, self.second, self.microsecond)

    def at(self, hour: int, minute: int = 0) -> "LocalWallClock":
        """Same local day, at the given clock time."""
        return LocalWallClock(self.year, self.month, self.day, hour, minute)

    def next_midnight(self) -> "LocalWallClock":
        return LocalWallClock.combine(self.date() + timedelta(days=1), time.min)

    def seconds_until(self, other: "LocalWallClock") -> float:
        return (other.as_naive() - self.as_naive()).total_seconds()

    def hours_until(self, other: "LocalWallClock") -> float:
        return self.seconds_until(other) / 3600
