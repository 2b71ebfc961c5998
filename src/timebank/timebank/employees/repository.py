from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeFilter, OrgScheduleDefaults


class EmployeeRepository(Protocol):
    """Employee profile reader.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def fetch_hire_date(self, employee_id: int) -> Optional[date]:
        raise NotImplementedError

    def list_active(self, filters: Optional[EmployeeFilter] = None) -> Sequence[Employee]:
        """Active employees ordered by name."""

        raise NotImplementedError


class CompanySettingsRepository(Protocol):
    def fetch_org_schedule_defaults(self) -> OrgScheduleDefaults:
        raise NotImplementedError
