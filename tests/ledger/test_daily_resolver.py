from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from src.timebank.timebank.core.enums import DayStatus, PunchType
from src.timebank.timebank.ledger.resolver import (
    NOTE_ABSENCE,
    NOTE_EXIT_BEFORE_ENTRY,
    NOTE_EXIT_MISSING,
    NOTE_JUSTIFIED_ABSENCE,
    NOTE_LUNCH_ASSUMED,
    NOTE_LUNCH_OUT_OF_ORDER,
    DailyHourResolver,
)
from src.timebank.timebank.punches.model import PunchEvent

WEDNESDAY = date(2024, 1, 10)
FRIDAY = date(2024, 1, 12)
SATURDAY = date(2024, 1, 13)
SUNDAY = date(2024, 1, 14)


def _punch(kind: PunchType, at: str, *, is_valid: bool = True, record_id: int = 1) -> PunchEvent:
    return PunchEvent(
        record_id=record_id,
        employee_id=1,
        kind=kind,
        timestamp=datetime.strptime(at, "%Y-%m-%d %H:%M"),
        is_valid=is_valid,
    )


def _day(*items) -> list[PunchEvent]:
    punches = [_punch(kind, at, record_id=i) for i, (kind, at) in enumerate(items, start=1)]
    return sorted(punches, key=lambda p: p.timestamp)


def test_long_wednesday_splits_overtime_around_22h():
    punches = _day(
        (PunchType.ENTRY, "2024-01-10 07:00"),
        (PunchType.LUNCH_START, "2024-01-10 12:00"),
        (PunchType.LUNCH_END, "2024-01-10 13:00"),
        (PunchType.EXIT, "2024-01-10 22:30"),
    )

    entry = DailyHourResolver().resolve_day(1, WEDNESDAY, punches)

    assert entry.status == DayStatus.WORKED
    assert entry.expected_hours == 9
    assert entry.worked_hours == pytest.approx(14.5)
    assert entry.raw_overtime_hours == pytest.approx(5.5)
    assert entry.overtime_hours_tier1 == pytest.approx(7.5)
    assert entry.overtime_hours_tier2 == pytest.approx(1.0)
    assert entry.overtime_hours == pytest.approx(8.5)
    assert entry.owed_hours == 0
    assert entry.lunch_hours == pytest.approx(1.0)
    assert entry.span_hours == pytest.approx(15.5)


def test_friday_without_exit_owes_the_whole_day():
    punches = _day((PunchType.ENTRY, "2024-01-12 07:00"))

    entry = DailyHourResolver().resolve_day(1, FRIDAY, punches)

    assert entry.status == DayStatus.INCOMPLETE
    assert entry.owed_hours == 8
    assert entry.overtime_hours == 0
    assert NOTE_EXIT_MISSING in entry.notes


def test_sunday_without_lunch_is_all_double_time():
    punches = _day(
        (PunchType.ENTRY, "2024-01-14 08:00"),
        (PunchType.EXIT, "2024-01-14 14:00"),
    )

    entry = DailyHourResolver().resolve_day(1, SUNDAY, punches)

    assert entry.worked_hours == pytest.approx(5.0)
    assert entry.overtime_hours_tier1 == 0
    assert entry.overtime_hours_tier2 == pytest.approx(10.0)
    assert entry.overtime_hours == pytest.approx(10.0)
    assert entry.owed_hours == 0
    assert NOTE_LUNCH_ASSUMED in entry.notes


def test_justified_absence_wins_over_entry_and_exit():
    punches = _day(
        (PunchType.ENTRY, "2024-01-10 07:00"),
        (PunchType.ABSENCE_JUSTIFIED, "2024-01-10 08:00"),
        (PunchType.EXIT, "2024-01-10 17:00"),
    )

    entry = DailyHourResolver().resolve_day(1, WEDNESDAY, punches)

    assert entry.status == DayStatus.JUSTIFIED_ABSENCE
    assert entry.worked_hours == 0
    assert entry.owed_hours == 0
    assert entry.overtime_hours == 0
    assert NOTE_JUSTIFIED_ABSENCE in entry.notes


def test_weekday_without_punches_is_an_absence():
    entry = DailyHourResolver().resolve_day(1, WEDNESDAY, [])

    assert entry.status == DayStatus.ABSENT
    assert entry.owed_hours == 9
    assert entry.notes == (NOTE_ABSENCE,)


def test_weekend_without_punches_has_nothing_to_account():
    entry = DailyHourResolver().resolve_day(1, SATURDAY, [])

    assert entry.status == DayStatus.NO_WORK_EXPECTED
    assert entry.owed_hours == 0
    assert entry.overtime_hours == 0
    assert entry.notes == ()


def test_invalid_punches_are_ignored():
    punches = [
        _punch(PunchType.ENTRY, "2024-01-10 07:00", is_valid=False, record_id=1),
        _punch(PunchType.EXIT, "2024-01-10 17:00", is_valid=False, record_id=2),
    ]

    entry = DailyHourResolver().resolve_day(1, WEDNESDAY, punches)

    assert entry.status == DayStatus.ABSENT
    assert entry.owed_hours == 9
    assert "2 invalid punch(es) ignored" in entry.notes


def test_weekday_shortfall_becomes_owed_hours():
    punches = _day(
        (PunchType.ENTRY, "2024-01-10 08:00"),
        (PunchType.LUNCH_START, "2024-01-10 12:00"),
        (PunchType.LUNCH_END, "2024-01-10 13:00"),
        (PunchType.EXIT, "2024-01-10 16:00"),
    )

    entry = DailyHourResolver().resolve_day(1, WEDNESDAY, punches)

    assert entry.worked_hours == pytest.approx(7.0)
    assert entry.owed_hours == pytest.approx(2.0)
    assert entry.overtime_hours == 0


def test_lunch_out_of_order_falls_back_to_one_hour():
    punches = _day(
        (PunchType.ENTRY, "2024-01-10 07:00"),
        (PunchType.LUNCH_END, "2024-01-10 12:00"),
        (PunchType.LUNCH_START, "2024-01-10 13:00"),
        (PunchType.EXIT, "2024-01-10 17:00"),
    )

    entry = DailyHourResolver().resolve_day(1, WEDNESDAY, punches)

    assert entry.worked_hours == pytest.approx(9.0)
    assert entry.owed_hours == 0
    assert entry.overtime_hours == 0
    assert NOTE_LUNCH_OUT_OF_ORDER in entry.notes


def test_exit_before_entry_never_goes_negative():
    punches = _day(
        (PunchType.EXIT, "2024-01-10 07:00"),
        (PunchType.ENTRY, "2024-01-10 17:00"),
    )

    entry = DailyHourResolver().resolve_day(1, WEDNESDAY, punches)

    assert entry.worked_hours == 0
    assert entry.owed_hours == 9
    assert NOTE_EXIT_BEFORE_ENTRY in entry.notes


def test_saturday_night_hours_get_the_night_rate():
    punches = _day(
        (PunchType.ENTRY, "2024-01-13 18:00"),
        (PunchType.EXIT, "2024-01-13 23:00"),
    )

    entry = DailyHourResolver().resolve_day(1, SATURDAY, punches)

    # 5h span minus the assumed lunch; the last hour falls after 22:00.
    assert entry.worked_hours == pytest.approx(4.0)
    assert entry.overtime_hours_tier1 == pytest.approx(4.5)
    assert entry.overtime_hours_tier2 == pytest.approx(2.0)
    assert entry.raw_overtime_hours == pytest.approx(4.0)


def test_break_punches_do_not_change_worked_hours():
    punches = _day(
        (PunchType.ENTRY, "2024-01-10 07:00"),
        (PunchType.BREAK_START, "2024-01-10 09:00"),
        (PunchType.BREAK_END, "2024-01-10 09:15"),
        (PunchType.LUNCH_START, "2024-01-10 12:00"),
        (PunchType.LUNCH_END, "2024-01-10 13:00"),
        (PunchType.EXIT, "2024-01-10 17:00"),
    )

    entry = DailyHourResolver().resolve_day(1, WEDNESDAY, punches)

    assert entry.worked_hours == pytest.approx(9.0)


def test_stored_utc_marker_is_not_applied():
    punches = [
        PunchEvent(1, 1, PunchType.ENTRY, datetime(2024, 1, 10, 7, 0, tzinfo=timezone.utc)),
        PunchEvent(2, 1, PunchType.LUNCH_START, datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)),
        PunchEvent(3, 1, PunchType.LUNCH_END, datetime(2024, 1, 10, 13, 0, tzinfo=timezone.utc)),
        PunchEvent(4, 1, PunchType.EXIT, datetime(2024, 1, 10, 22, 30, tzinfo=timezone.utc)),
    ]

    entry = DailyHourResolver().resolve_day(1, WEDNESDAY, punches)

    assert entry.overtime_hours_tier2 == pytest.approx(1.0)
    assert entry.overtime_hours == pytest.approx(8.5)


@pytest.mark.parametrize(
    "day, items",
    [
        (WEDNESDAY, [(PunchType.ENTRY, "2024-01-10 07:00"), (PunchType.EXIT, "2024-01-10 22:30")]),
        (WEDNESDAY, [(PunchType.ENTRY, "2024-01-10 09:00"), (PunchType.EXIT, "2024-01-10 15:00")]),
        (FRIDAY, [(PunchType.ENTRY, "2024-01-12 07:00"), (PunchType.EXIT, "2024-01-12 16:00")]),
        (SATURDAY, [(PunchType.ENTRY, "2024-01-13 20:00"), (PunchType.EXIT, "2024-01-13 23:30")]),
        (SUNDAY, [(PunchType.ENTRY, "2024-01-14 08:00")]),
        (SUNDAY, []),
    ],
)
def test_overtime_and_debt_are_never_both_positive(day, items):
    entry = DailyHourResolver().resolve_day(1, day, _day(*items))

    assert entry.overtime_hours == pytest.approx(entry.overtime_hours_tier1 + entry.overtime_hours_tier2)
    assert not (entry.overtime_hours > 0 and entry.owed_hours > 0)
    assert entry.worked_hours >= 0
    assert entry.owed_hours >= 0
