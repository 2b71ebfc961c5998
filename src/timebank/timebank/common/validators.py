from __future__ import annotations

from datetime import date
from typing import Any

from ..core.exceptions import ValidationError


def require_employee_id(value: Any) -> int:
    try:
        employee_id = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Invalid employee id")
    if employee_id <= 0:
        raise ValidationError("Invalid employee id")
    return employee_id


def require_date_range(start: date, end: date) -> None:
    if end < start:
        raise ValidationError("End date cannot be before start date")
