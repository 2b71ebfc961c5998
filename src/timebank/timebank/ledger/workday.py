from __future__ import annotations

from datetime import date

# Monday=0 ... Sunday=6
_EXPECTED_HOURS_BY_WEEKDAY = {
    0: 9,
    1: 9,
    2: 9,
    3: 9,
    4: 8,
    5: 0,
    6: 0,
}


def expected_hours(day: date) -> int:
    """Hours an employee is expected to work on ``day``.

    Mon-Thu 07:00-17:00 and Fri 07:00-16:00, both with 1h lunch. Weekends
    return 0, meaning any hours worked there are overtime, not a day off.
    """
    return _EXPECTED_HOURS_BY_WEEKDAY[day.weekday()]


def is_sunday(day: date) -> bool:
    return day.weekday() == 6
