from __future__ import annotations

from enum import Enum


class PunchType(str, Enum):
    """Kind of clock action stored for an employee."""

    ENTRY = "ENTRY"
    EXIT = "EXIT"
    LUNCH_START = "LUNCH_START"
    LUNCH_END = "LUNCH_END"
    BREAK_START = "BREAK_START"
    BREAK_END = "BREAK_END"
    ABSENCE_JUSTIFIED = "ABSENCE_JUSTIFIED"


class BankStatus(str, Enum):
    """Filter for the bank-hours overview, by sign of the balance."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    ZERO = "zero"


class DayStatus(str, Enum):
    """How the resolver classified one employee-day."""

    NO_WORK_EXPECTED = "NO_WORK_EXPECTED"
    ABSENT = "ABSENT"
    JUSTIFIED_ABSENCE = "JUSTIFIED_ABSENCE"
    INCOMPLETE = "INCOMPLETE"
    WORKED = "WORKED"
