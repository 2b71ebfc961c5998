from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from ..common.validators import require_date_range, require_employee_id
from ..core.enums import BankStatus
from ..core.exceptions import NotFoundError
from ..employees.model import Employee, EmployeeFilter
from ..employees.repository import CompanySettingsRepository, EmployeeRepository
from ..ledger.aggregator import PeriodAggregator
from ..ledger.time_bank import TimeBankCalculator
from ..punches.repository import PunchRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: dict


def _iso(value: Optional[date]) -> Optional[str]:
    return value.strftime("%Y-%m-%d") if value else None


def _matches_status(balance: float, status: Optional[BankStatus]) -> bool:
    if status is None:
        return True
    if status == BankStatus.POSITIVE:
        return balance > 0
    if status == BankStatus.NEGATIVE:
        return balance < 0
    return balance == 0


class ReportService:
    """Reshapes ledger output per employee/department for the report endpoints."""

    def __init__(
        self,
        *,
        employees: EmployeeRepository,
        settings: CompanySettingsRepository,
        punches: PunchRepository,
        aggregator: PeriodAggregator,
        time_bank: TimeBankCalculator,
    ):
        self._employees = employees
        self._settings = settings
        self._punches = punches
        self._aggregator = aggregator
        self._time_bank = time_bank

    def build_time_bank_report(
        self,
        *,
        start: date,
        end: date,
        as_of: date | datetime,
        employee_id: Optional[int] = None,
        detailed: bool = False,
    ) -> dict:
        """Time bank summary (and per-day list when ``detailed``).

        Without ``employee_id`` every active employee gets a summary.
        """

        require_date_range(start, end)

        if employee_id is not None:
            employee_id = require_employee_id(employee_id)
            result = self._time_bank.compute_time_bank(employee_id, start, end, as_of=as_of)
            return result.to_dict(detailed=detailed)

        employees = self._employees.list_active()
        results = [
            self._time_bank.compute_time_bank(e.employee_id, start, end, as_of=as_of).to_dict(detailed=detailed)
            for e in employees
        ]
        logger.info("time bank report %s..%s employees=%s", start, end, len(results))
        return {
            "period": {"startDate": _iso(start), "endDate": _iso(end)},
            "employees": results,
            "total": len(results),
        }

    def build_bank_hours_overview(
        self,
        *,
        start: date,
        end: date,
        as_of: date | datetime,
        filters: Optional[EmployeeFilter] = None,
        status: Optional[BankStatus] = None,
    ) -> ReportData:
        require_date_range(start, end)

        rows: list[dict] = []
        for e in self._employees.list_active(filters):
            result = self._time_bank.compute_time_bank(e.employee_id, start, end, as_of=as_of)
            if not _matches_status(result.balance_hours, status):
                continue
            rows.append(
                {
                    "employeeId": e.employee_id,
                    "employeeCode": e.employee_code,
                    "employeeName": e.full_name,
                    "employeeCpf": e.cpf,
                    "department": e.department,
                    "position": e.position,
                    "costCenter": e.cost_center,
                    "client": e.client,
                    "hireDate": _iso(e.hire_date),
                    "actualStartDate": _iso(result.start_date),
                    "totalWorkedHours": result.total_worked_hours,
                    "totalExpectedHours": result.total_expected_hours,
                    "bankHours": result.balance_hours,
                    "overtimeHours": result.total_overtime_raw,
                    "overtimeMultipliedHours": result.total_overtime_hours,
                    "pendingHours": result.total_owed_hours,
                }
            )

        logger.info("bank hours overview %s..%s rows=%s status=%s", start, end, len(rows), status)
        return ReportData(
            rows=rows,
            summary={
                "period": {"startDate": _iso(start), "endDate": _iso(end)},
                "total": len(rows),
            },
        )

    def build_attendance_report(
        self,
        *,
        start: date,
        end: date,
        department: Optional[str] = None,
        employee_id: Optional[int] = None,
    ) -> ReportData:
        require_date_range(start, end)

        schedule = self._settings.fetch_org_schedule_defaults()
        employee_ids = self._punches.list_employee_ids_with_punches(
            start=start, end=end, department=department, employee_id=employee_id
        )

        rows: list[dict] = []
        for emp_id in employee_ids:
            employee = self._require_employee(emp_id)
            ledger = self._aggregator.aggregate_period(emp_id, start, end, schedule=schedule)
            row = ledger.to_dict()
            row.pop("issues")
            row.update(
                {
                    "employeeCode": employee.employee_code,
                    "employeeName": employee.full_name,
                    "department": employee.department,
                    "position": employee.position,
                }
            )
            rows.append(row)

        rows.sort(key=lambda r: r["employeeName"])
        return ReportData(
            rows=rows,
            summary={
                "period": {"startDate": _iso(start), "endDate": _iso(end)},
                "total": len(rows),
                "presentDays": sum(r["presentDays"] for r in rows),
                "absentDays": sum(r["absentDays"] for r in rows),
                "lateArrivals": sum(r["lateArrivals"] for r in rows),
                "earlyDepartures": sum(r["earlyDepartures"] for r in rows),
            },
        )

    def build_late_arrivals_report(
        self,
        *,
        start: date,
        end: date,
        department: Optional[str] = None,
    ) -> ReportData:
        require_date_range(start, end)

        schedule = self._settings.fetch_org_schedule_defaults()
        tolerance = timedelta(minutes=schedule.tolerance_minutes)
        employees: dict[int, Employee] = {}

        rows: list[dict] = []
        for punch in self._punches.list_entry_punches(start=start, end=end, department=department):
            actual = punch.wall_clock.as_naive()
            expected = datetime.combine(actual.date(), schedule.start_time)
            if actual <= expected + tolerance:
                continue

            if punch.employee_id not in employees:
                employees[punch.employee_id] = self._require_employee(punch.employee_id)
            employee = employees[punch.employee_id]

            delay_minutes = int((actual - expected).total_seconds() // 60)
            rows.append(
                {
                    "employeeId": employee.employee_id,
                    "employeeCode": employee.employee_code,
                    "employeeName": employee.full_name,
                    "department": employee.department,
                    "position": employee.position,
                    "date": actual.strftime("%Y-%m-%d"),
                    "expectedTime": expected.strftime("%H:%M"),
                    "actualTime": actual.strftime("%H:%M:%S"),
                    "delayMinutes": delay_minutes,
                    "delayHours": delay_minutes // 60,
                    "delayMinutesRemainder": delay_minutes % 60,
                }
            )

        return ReportData(
            rows=rows,
            summary={
                "period": {"startDate": _iso(start), "endDate": _iso(end)},
                "total": len(rows),
                "toleranceMinutes": schedule.tolerance_minutes,
            },
        )

    def _require_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee
