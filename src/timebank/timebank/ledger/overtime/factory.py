from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..workday import is_sunday
from .base import OvertimeStrategy
from .saturday_strategy import SaturdayOvertimeStrategy
from .sunday_strategy import SundayOvertimeStrategy
from .weekday_strategy import WeekdayOvertimeStrategy


@dataclass
class OvertimeStrategyFactory:
    """Factory Pattern: choose the overtime rule for a day."""

    def for_day(self, *, day: date, expected_hours: float) -> OvertimeStrategy:
        if expected_hours > 0:
            return WeekdayOvertimeStrategy()
        if is_sunday(day):
            return SundayOvertimeStrategy()
        return SaturdayOvertimeStrategy()
