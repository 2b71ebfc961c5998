from __future__ import annotations

from datetime import date, datetime, time

import pytest

from src.timebank.timebank.core.enums import PunchType
from src.timebank.timebank.core.exceptions import ValidationError
from src.timebank.timebank.employees.model import OrgScheduleDefaults
from src.timebank.timebank.ledger.aggregator import PeriodAggregator
from src.timebank.timebank.punches.model import PunchEvent


class InMemoryPunchRepo:
    def __init__(self, punches):
        self._punches = sorted(punches, key=lambda p: p.timestamp)
        self.fetch_calls = 0

    def fetch_punches(self, employee_id, day_start, day_end):
        self.fetch_calls += 1
        return [
            p for p in self._punches if p.employee_id == employee_id and day_start <= p.timestamp <= day_end
        ]


def _punches(employee_id: int, *items) -> list[PunchEvent]:
    return [
        PunchEvent(
            record_id=i,
            employee_id=employee_id,
            kind=kind,
            timestamp=datetime.strptime(at, "%Y-%m-%d %H:%M"),
        )
        for i, (kind, at) in enumerate(items, start=1)
    ]


def _week_repo() -> InMemoryPunchRepo:
    return InMemoryPunchRepo(
        _punches(
            1,
            # Monday: exact journey
            (PunchType.ENTRY, "2024-01-08 07:00"),
            (PunchType.LUNCH_START, "2024-01-08 12:00"),
            (PunchType.LUNCH_END, "2024-01-08 13:00"),
            (PunchType.EXIT, "2024-01-08 17:00"),
            # Tuesday: late and early
            (PunchType.ENTRY, "2024-01-09 07:30"),
            (PunchType.LUNCH_START, "2024-01-09 12:00"),
            (PunchType.LUNCH_END, "2024-01-09 13:00"),
            (PunchType.EXIT, "2024-01-09 16:30"),
            # Wednesday: nothing
            # Thursday: justified
            (PunchType.ABSENCE_JUSTIFIED, "2024-01-11 08:00"),
            # Friday: 2h overtime
            (PunchType.ENTRY, "2024-01-12 07:00"),
            (PunchType.LUNCH_START, "2024-01-12 12:00"),
            (PunchType.LUNCH_END, "2024-01-12 13:00"),
            (PunchType.EXIT, "2024-01-12 18:00"),
        )
    )


def test_week_summary():
    repo = _week_repo()
    ledger = PeriodAggregator(repo).aggregate_period(
        1, date(2024, 1, 8), date(2024, 1, 14), schedule=OrgScheduleDefaults()
    )

    assert ledger.total_days == 7
    assert repo.fetch_calls == 7
    assert ledger.present_days == 3
    assert ledger.absent_days == 1
    # Gross spans: 10 + 9 + 11, lunch included
    assert ledger.total_hours == pytest.approx(30.0)
    # 9 + 8 + 9 (justified) + 8
    assert ledger.regular_hours == pytest.approx(34.0)
    assert ledger.overtime_hours == pytest.approx(2.0)
    assert ledger.late_arrivals == 1
    assert ledger.early_departures == 1
    assert ledger.average_hours_per_day == pytest.approx(10.0)
    assert ledger.attendance_rate == pytest.approx(3 / 7 * 100)
    assert "2024-01-10: absence" in ledger.issues
    assert "2024-01-11: justified absence" in ledger.issues


def test_schedule_defaults_drive_lateness():
    schedule = OrgScheduleDefaults(start_time=time(8, 0), end_time=time(16, 0), tolerance_minutes=0)

    ledger = PeriodAggregator(_week_repo()).aggregate_period(
        1, date(2024, 1, 8), date(2024, 1, 12), schedule=schedule
    )

    assert ledger.late_arrivals == 0
    assert ledger.early_departures == 0


def test_single_day_period():
    ledger = PeriodAggregator(_week_repo()).aggregate_period(
        1, date(2024, 1, 10), date(2024, 1, 10), schedule=OrgScheduleDefaults()
    )

    assert ledger.total_days == 1
    assert ledger.absent_days == 1
    assert ledger.present_days == 0
    assert ledger.average_hours_per_day == 0
    assert ledger.attendance_rate == 0


def test_to_dict_shape():
    data = (
        PeriodAggregator(_week_repo())
        .aggregate_period(1, date(2024, 1, 8), date(2024, 1, 9), schedule=OrgScheduleDefaults())
        .to_dict()
    )

    assert data["period"] == {"startDate": "2024-01-08", "endDate": "2024-01-09"}
    assert data["presentDays"] == 2
    assert data["attendanceRate"] == pytest.approx(100.0)


def test_rejects_inverted_range():
    with pytest.raises(ValidationError):
        PeriodAggregator(_week_repo()).aggregate_period(
            1, date(2024, 1, 9), date(2024, 1, 8), schedule=OrgScheduleDefaults()
        )


def test_rejects_bad_employee_id():
    with pytest.raises(ValidationError):
        PeriodAggregator(_week_repo()).aggregate_period(
            0, date(2024, 1, 8), date(2024, 1, 9), schedule=OrgScheduleDefaults()
        )


def test_total_hours_count_the_gross_span():
    repo = InMemoryPunchRepo(
        _punches(
            1,
            (PunchType.ENTRY, "2024-01-08 07:00"),
            (PunchType.LUNCH_START, "2024-01-08 12:00"),
            (PunchType.LUNCH_END, "2024-01-08 13:00"),
            (PunchType.EXIT, "2024-01-08 17:20"),
            (PunchType.ENTRY, "2024-01-09 07:00"),
            (PunchType.LUNCH_START, "2024-01-09 12:00"),
            (PunchType.LUNCH_END, "2024-01-09 13:00"),
            (PunchType.EXIT, "2024-01-09 16:30"),
        )
    )

    ledger = PeriodAggregator(repo).aggregate_period(
        1, date(2024, 1, 8), date(2024, 1, 9), schedule=OrgScheduleDefaults()
    )

    assert ledger.total_hours == pytest.approx(10 + 20 / 60 + 9.5)
    assert ledger.average_hours_per_day == pytest.approx((10 + 20 / 60 + 9.5) / 2)
    # Regular hours stay net of lunch: 9 + 8.5
    assert ledger.regular_hours == pytest.approx(17.5)
