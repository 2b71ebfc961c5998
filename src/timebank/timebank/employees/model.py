from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..core.constants import DEFAULT_TOLERANCE_MINUTES, DEFAULT_WORK_END, DEFAULT_WORK_START


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee profile (read-only to the ledger).

    Note: plain data object, no DB access code here.
    """

    employee_id: int
    employee_code: str
    full_name: str
    hire_date: date
    cpf: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    cost_center: Optional[str] = None
    client: Optional[str] = None
    is_active: bool = True


@dataclass(frozen=True)
class OrgScheduleDefaults:
    """Organization-wide expected start/end times and late tolerance."""

    start_time: time = DEFAULT_WORK_START
    end_time: time = DEFAULT_WORK_END
    tolerance_minutes: int = DEFAULT_TOLERANCE_MINUTES


@dataclass(frozen=True)
class EmployeeFilter:
    search: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    cost_center: Optional[str] = None
    client: Optional[str] = None
