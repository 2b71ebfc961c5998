from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from ..core.constants import HOURS_PRECISION
from ..core.enums import DayStatus


def _iso(value: Optional[date]) -> Optional[str]:
    return value.strftime("%Y-%m-%d") if value else None


def round_hours(value: float) -> float:
    """Drop float noise so minute-granular balances come out exact."""
    return round(value, HOURS_PRECISION) + 0.0


@dataclass(frozen=True)
class DayLedgerEntry:
    """Resolver output for one employee-day.

    ``overtime_hours_tier1``/``overtime_hours_tier2`` are already weighted
    (x1.5 and x2.0); ``raw_overtime_hours`` is the unweighted overtime.
    ``span_hours`` is the gross entry-to-exit span, lunch included.
    """

    date: date
    expected_hours: int
    status: DayStatus
    worked_hours: float = 0.0
    overtime_hours: float = 0.0
    overtime_hours_tier1: float = 0.0
    overtime_hours_tier2: float = 0.0
    owed_hours: float = 0.0
    raw_overtime_hours: float = 0.0
    lunch_hours: float = 0.0
    span_hours: float = 0.0
    notes: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "date": _iso(self.date),
            "status": self.status.value,
            "expectedHours": self.expected_hours,
            "workedHours": self.worked_hours,
            "overtimeHours": self.overtime_hours,
            "overtimeHoursTier1": self.overtime_hours_tier1,
            "overtimeHoursTier2": self.overtime_hours_tier2,
            "owedHours": self.owed_hours,
            "rawOvertimeHours": self.raw_overtime_hours,
            "lunchHours": self.lunch_hours,
            "spanHours": self.span_hours,
            "notes": list(self.notes),
        }


@dataclass(frozen=True)
class PeriodLedger:
    employee_id: int
    start_date: date
    end_date: date
    total_days: int = 0
    present_days: int = 0
    absent_days: int = 0
    total_hours: float = 0.0
    regular_hours: float = 0.0
    overtime_hours: float = 0.0
    late_arrivals: int = 0
    early_departures: int = 0
    average_hours_per_day: float = 0.0
    issues: tuple[str, ...] = ()

    @property
    def attendance_rate(self) -> float:
        if self.total_days <= 0:
            return 0.0
        return self.present_days / self.total_days * 100

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "period": {"startDate": _iso(self.start_date), "endDate": _iso(self.end_date)},
            "totalDays": self.total_days,
            "presentDays": self.present_days,
            "absentDays": self.absent_days,
            "totalHours": self.total_hours,
            "regularHours": self.regular_hours,
            "overtimeHours": self.overtime_hours,
            "averageHoursPerDay": self.average_hours_per_day,
            "lateArrivals": self.late_arrivals,
            "earlyDepartures": self.early_departures,
            "attendanceRate": self.attendance_rate,
            "issues": list(self.issues),
        }


@dataclass(frozen=True)
class TimeBankResult:
    employee_id: int
    requested_start: date
    requested_end: date
    start_date: date
    end_date: date
    total_overtime_hours: float = 0.0
    total_owed_hours: float = 0.0
    balance_hours: float = 0.0
    total_overtime_raw: float = 0.0
    balance_hours_raw: float = 0.0
    total_worked_hours: float = 0.0
    total_expected_hours: float = 0.0
    days: tuple[DayLedgerEntry, ...] = field(default_factory=tuple)

    @classmethod
    def fold(
        cls,
        *,
        employee_id: int,
        requested_start: date,
        requested_end: date,
        start_date: date,
        end_date: date,
        days: Sequence[DayLedgerEntry],
    ) -> "TimeBankResult":
        """Accumulate day entries into balance totals."""

        total_overtime = round_hours(sum(d.overtime_hours for d in days))
        total_owed = round_hours(sum(d.owed_hours for d in days))
        total_raw = round_hours(sum(d.raw_overtime_hours for d in days))
        return cls(
            employee_id=employee_id,
            requested_start=requested_start,
            requested_end=requested_end,
            start_date=start_date,
            end_date=end_date,
            total_overtime_hours=total_overtime,
            total_owed_hours=total_owed,
            balance_hours=round_hours(total_overtime - total_owed),
            total_overtime_raw=total_raw,
            balance_hours_raw=round_hours(total_raw - total_owed),
            total_worked_hours=round_hours(sum(d.worked_hours for d in days)),
            total_expected_hours=sum(d.expected_hours for d in days),
            days=tuple(days),
        )

    def to_dict(self, *, detailed: bool = False) -> dict:
        out = {
            "employeeId": self.employee_id,
            "startDate": _iso(self.start_date),
            "endDate": _iso(self.end_date),
            "requestedStartDate": _iso(self.requested_start),
            "requestedEndDate": _iso(self.requested_end),
            "balanceHours": self.balance_hours,
            "totalOvertimeHours": self.total_overtime_hours,
            "totalOwedHours": self.total_owed_hours,
            "totalOvertimeRaw": self.total_overtime_raw,
            "balanceHoursRaw": self.balance_hours_raw,
            "totalWorkedHours": self.total_worked_hours,
            "totalExpectedHours": self.total_expected_hours,
        }
        if detailed:
            out["days"] = [d.to_dict() for d in self.days]
        return out
