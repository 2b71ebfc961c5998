from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import day_bounds, iter_days
from ..common.validators import require_date_range, require_employee_id
from ..core.enums import DayStatus, PunchType
from ..employees.model import OrgScheduleDefaults
from ..punches.model import first_of_kind, last_of_kind
from ..punches.repository import PunchRepository
from .model import PeriodLedger, round_hours
from .resolver import DailyHourResolver

logger = logging.getLogger(__name__)

_PRESENT = {DayStatus.WORKED, DayStatus.INCOMPLETE}


class PeriodAggregator:
    """Day-by-day attendance summary for one employee over a closed date range."""

    def __init__(self, punches: PunchRepository, *, resolver: Optional[DailyHourResolver] = None):
        self._punches = punches
        self._resolver = resolver or DailyHourResolver()

    def aggregate_period(
        self,
        employee_id: int,
        start: date,
        end: date,
        *,
        schedule: OrgScheduleDefaults,
    ) -> PeriodLedger:
        """Aggregate ``start``..``end`` (inclusive).

        ``schedule`` is read once by the caller and reused for every day's
        lateness/early-departure check.
        """

        employee_id = require_employee_id(employee_id)
        require_date_range(start, end)

        total_days = present = absent = 0
        total_hours = regular_hours = overtime_hours = 0.0
        late = early = 0
        issues: list[str] = []

        for day in iter_days(start, end):
            total_days += 1
            punches = self._punches.fetch_punches(employee_id, *day_bounds(day))
            entry = self._resolver.resolve_day(employee_id, day, punches)
            iso_day = day.strftime("%Y-%m-%d")
            issues.extend(f"{iso_day}: {note}" for note in entry.notes)

            if entry.status in _PRESENT:
                present += 1
                # Gross entry-to-exit span, lunch included.
                total_hours += entry.span_hours
                regular_hours += min(entry.worked_hours, float(entry.expected_hours))
                overtime_hours += entry.raw_overtime_hours

                valid = [p for p in punches if p.is_valid]
                entry_punch = first_of_kind(valid, PunchType.ENTRY)
                if entry_punch and entry_punch.wall_clock.time() > schedule.start_time:
                    late += 1
                exit_punch = last_of_kind(valid, PunchType.EXIT)
                if exit_punch and exit_punch.wall_clock.time() < schedule.end_time:
                    early += 1
            elif entry.status == DayStatus.JUSTIFIED_ABSENCE:
                # Counted as regular hours, but neither present nor absent.
                regular_hours += entry.expected_hours
            elif entry.status == DayStatus.ABSENT:
                absent += 1

        logger.debug(
            "period employee=%s %s..%s days=%s present=%s absent=%s",
            employee_id, start, end, total_days, present, absent,
        )

        return PeriodLedger(
            employee_id=employee_id,
            start_date=start,
            end_date=end,
            total_days=total_days,
            present_days=present,
            absent_days=absent,
            total_hours=round_hours(total_hours),
            regular_hours=round_hours(regular_hours),
            overtime_hours=round_hours(overtime_hours),
            late_arrivals=late,
            early_departures=early,
            average_hours_per_day=round_hours(total_hours / present) if present else 0.0,
            issues=tuple(issues),
        )
