from datetime import date

import pytest

from src.timebank.timebank.ledger.overtime.factory import OvertimeStrategyFactory
from src.timebank.timebank.ledger.overtime.saturday_strategy import SaturdayOvertimeStrategy
from src.timebank.timebank.ledger.overtime.sunday_strategy import SundayOvertimeStrategy
from src.timebank.timebank.ledger.overtime.weekday_strategy import WeekdayOvertimeStrategy


def test_factory_picks_weekday_rule_when_hours_are_expected():
    strategy = OvertimeStrategyFactory().for_day(day=date(2024, 1, 12), expected_hours=8)

    assert isinstance(strategy, WeekdayOvertimeStrategy)


def test_factory_picks_saturday_rule():
    strategy = OvertimeStrategyFactory().for_day(day=date(2024, 1, 13), expected_hours=0)

    assert isinstance(strategy, SaturdayOvertimeStrategy)


def test_factory_picks_sunday_rule():
    strategy = OvertimeStrategyFactory().for_day(day=date(2024, 1, 14), expected_hours=0)

    assert isinstance(strategy, SundayOvertimeStrategy)


def test_weekday_exact_journey_has_no_balance():
    split = WeekdayOvertimeStrategy().split(worked_hours=9.0, expected_hours=9, worked_after_22=0.0)

    assert split.overtime_hours == 0
    assert split.owed_hours == 0
    assert split.raw_overtime_hours == 0


def test_weekday_night_hours_capped_by_overtime():
    # Worked 2h after 22:00 but only 1h beyond the journey.
    split = WeekdayOvertimeStrategy().split(worked_hours=10.0, expected_hours=9, worked_after_22=2.0)

    assert split.tier1_hours == 0
    assert split.tier2_hours == pytest.approx(2.0)
    assert split.raw_overtime_hours == pytest.approx(1.0)


def test_weekday_shortfall():
    split = WeekdayOvertimeStrategy().split(worked_hours=6.5, expected_hours=8, worked_after_22=0.0)

    assert split.owed_hours == pytest.approx(1.5)
    assert split.overtime_hours == 0


def test_saturday_all_daytime_is_tier1():
    split = SaturdayOvertimeStrategy().split(worked_hours=4.0, expected_hours=0, worked_after_22=0.0)

    assert split.tier1_hours == pytest.approx(6.0)
    assert split.tier2_hours == 0
    assert split.raw_overtime_hours == pytest.approx(4.0)


def test_sunday_ignores_time_of_day():
    split = SundayOvertimeStrategy().split(worked_hours=3.0, expected_hours=0, worked_after_22=1.0)

    assert split.tier1_hours == 0
    assert split.tier2_hours == pytest.approx(6.0)
