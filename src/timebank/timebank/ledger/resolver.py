"""Daily hour resolution.

Turns one employee-day of punch events into a ``DayLedgerEntry``. Data-quality
problems (missing entry/exit/lunch, conflicting punches) never raise: the
resolver falls back to a conservative result and records a note.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional, Sequence

from ..common.wallclock import LocalWallClock
from ..core.constants import ASSUMED_LUNCH_HOURS, NIGHT_PREMIUM_START_HOUR
from ..core.enums import DayStatus, PunchType
from ..punches.model import PunchEvent, first_of_kind, last_of_kind
from .model import DayLedgerEntry, round_hours
from .overtime.factory import OvertimeStrategyFactory
from .workday import expected_hours

NOTE_ABSENCE = "absence"
NOTE_JUSTIFIED_ABSENCE = "justified absence"
NOTE_ENTRY_MISSING = "entry not recorded"
NOTE_EXIT_MISSING = "exit not recorded"
NOTE_EXIT_BEFORE_ENTRY = "exit recorded before entry"
NOTE_LUNCH_ASSUMED = f"lunch not recorded - assuming {ASSUMED_LUNCH_HOURS}h"
NOTE_LUNCH_OUT_OF_ORDER = f"lunch punches out of order - assuming {ASSUMED_LUNCH_HOURS}h"

Interval = tuple[LocalWallClock, LocalWallClock]


def _overlap_seconds(interval: Interval, window: Interval) -> float:
    start = max(interval[0], window[0])
    end = min(interval[1], window[1])
    if end > start:
        return start.seconds_until(end)
    return 0.0


class DailyHourResolver:
    def __init__(
        self,
        *,
        strategy_factory: Optional[OvertimeStrategyFactory] = None,
        workday_rule: Callable[[date], int] = expected_hours,
    ):
        self._factory = strategy_factory or OvertimeStrategyFactory()
        self._workday_rule = workday_rule

    def resolve_day(self, employee_id: int, day: date, punches: Sequence[PunchEvent]) -> DayLedgerEntry:
        expected = self._workday_rule(day)
        notes: list[str] = []

        valid = [p for p in punches if p.is_valid]
        ignored = len(punches) - len(valid)
        if ignored:
            notes.append(f"{ignored} invalid punch(es) ignored")

        if not valid:
            if expected == 0:
                return DayLedgerEntry(date=day, expected_hours=0, status=DayStatus.NO_WORK_EXPECTED, notes=tuple(notes))
            notes.append(NOTE_ABSENCE)
            return DayLedgerEntry(
                date=day,
                expected_hours=expected,
                status=DayStatus.ABSENT,
                owed_hours=float(expected),
                notes=tuple(notes),
            )

        if any(p.kind == PunchType.ABSENCE_JUSTIFIED for p in valid):
            notes.append(NOTE_JUSTIFIED_ABSENCE)
            return DayLedgerEntry(
                date=day,
                expected_hours=expected,
                status=DayStatus.JUSTIFIED_ABSENCE,
                notes=tuple(notes),
            )

        entry = first_of_kind(valid, PunchType.ENTRY)
        exit_ = last_of_kind(valid, PunchType.EXIT)
        if entry is None:
            notes.append(NOTE_ENTRY_MISSING)
        if exit_ is None:
            notes.append(NOTE_EXIT_MISSING)
        if entry is None or exit_ is None:
            return DayLedgerEntry(
                date=day,
                expected_hours=expected,
                status=DayStatus.INCOMPLETE,
                owed_hours=float(expected),
                notes=tuple(notes),
            )

        entry_at = entry.wall_clock
        exit_at = exit_.wall_clock
        if exit_at <= entry_at:
            notes.append(NOTE_EXIT_BEFORE_ENTRY)

        lunch_seconds, intervals = self._work_intervals(valid, entry_at, exit_at, notes)
        worked_seconds = max(0.0, entry_at.seconds_until(exit_at) - lunch_seconds)
        worked = worked_seconds / 3600

        # Night premium window: [22:00, 24:00) of the entry's local day.
        window = (entry_at.at(NIGHT_PREMIUM_START_HOUR), entry_at.next_midnight())
        after_22 = sum(_overlap_seconds(i, window) for i in intervals) / 3600

        strategy = self._factory.for_day(day=day, expected_hours=expected)
        split = strategy.split(worked_hours=worked, expected_hours=expected, worked_after_22=after_22)

        tier1 = round_hours(split.tier1_hours)
        tier2 = round_hours(split.tier2_hours)
        return DayLedgerEntry(
            date=day,
            expected_hours=expected,
            status=DayStatus.WORKED,
            worked_hours=round_hours(worked),
            overtime_hours=round_hours(tier1 + tier2),
            overtime_hours_tier1=tier1,
            overtime_hours_tier2=tier2,
            owed_hours=round_hours(split.owed_hours),
            raw_overtime_hours=round_hours(split.raw_overtime_hours),
            lunch_hours=round_hours(lunch_seconds / 3600),
            span_hours=round_hours(max(0.0, entry_at.hours_until(exit_at))),
            notes=tuple(notes),
        )

    @staticmethod
    def _work_intervals(
        punches: Sequence[PunchEvent],
        entry_at: LocalWallClock,
        exit_at: LocalWallClock,
        notes: list[str],
    ) -> tuple[float, list[Interval]]:
        """Lunch length in seconds and the intervals actually worked."""

        lunch_start = first_of_kind(punches, PunchType.LUNCH_START)
        lunch_end = first_of_kind(punches, PunchType.LUNCH_END)

        if lunch_start and lunch_end:
            start_at = lunch_start.wall_clock
            end_at = lunch_end.wall_clock
            if end_at > start_at:
                return start_at.seconds_until(end_at), [(entry_at, start_at), (end_at, exit_at)]
            notes.append(NOTE_LUNCH_OUT_OF_ORDER)
        else:
            notes.append(NOTE_LUNCH_ASSUMED)

        return ASSUMED_LUNCH_HOURS * 3600.0, [(entry_at, exit_at)]
