from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import as_date, day_bounds, iter_days
from ..common.validators import require_date_range, require_employee_id
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from ..punches.repository import PunchRepository
from .model import TimeBankResult
from .resolver import DailyHourResolver

logger = logging.getLogger(__name__)


class TimeBankCalculator:
    """Compensatory balance (overtime earned minus hours owed) for one employee.

    The requested range is clipped to [hire date, as_of]: nothing accrues
    before employment began and not-yet-occurred days are never reported.
    """

    def __init__(
        self,
        punches: PunchRepository,
        employees: EmployeeRepository,
        *,
        resolver: Optional[DailyHourResolver] = None,
    ):
        self._punches = punches
        self._employees = employees
        self._resolver = resolver or DailyHourResolver()

    def effective_range(
        self,
        employee_id: int,
        start: date,
        end: date,
        *,
        as_of: date | datetime,
    ) -> tuple[date, date]:
        employee_id = require_employee_id(employee_id)
        require_date_range(start, end)

        hire_date = self._employees.fetch_hire_date(employee_id)
        if hire_date is None:
            raise NotFoundError(f"Employee {employee_id} not found")

        return max(start, as_date(hire_date)), min(end, as_date(as_of))

    def compute_time_bank(
        self,
        employee_id: int,
        start: date,
        end: date,
        *,
        as_of: date | datetime,
    ) -> TimeBankResult:
        employee_id = require_employee_id(employee_id)
        effective_start, effective_end = self.effective_range(employee_id, start, end, as_of=as_of)
        if (effective_start, effective_end) != (start, end):
            logger.debug(
                "time bank employee=%s clipped %s..%s -> %s..%s",
                employee_id, start, end, effective_start, effective_end,
            )

        days = [
            self._resolver.resolve_day(employee_id, day, self._punches.fetch_punches(employee_id, *day_bounds(day)))
            for day in iter_days(effective_start, effective_end)
        ]

        return TimeBankResult.fold(
            employee_id=employee_id,
            requested_start=start,
            requested_end=end,
            start_date=effective_start,
            end_date=effective_end,
            days=days,
        )
