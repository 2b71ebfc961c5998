from __future__ import annotations

from datetime import date
from typing import Mapping, Optional

from flask import jsonify

from .datetime_utils import first_day_of_month, parse_iso_date
from .validators import require_date_range, require_employee_id

_TRUE_VALUES = {"1", "true", "yes", "on"}


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def date_range_from_args(args: Mapping[str, str], *, today: date) -> tuple[date, date]:
    """startDate/endDate query args; defaults to the current month up to today."""

    start_s = args.get("startDate")
    end_s = args.get("endDate")
    start = parse_iso_date(start_s) if start_s else first_day_of_month(today)
    end = parse_iso_date(end_s) if end_s else today
    require_date_range(start, end)
    return start, end


def optional_employee_id(args: Mapping[str, str]) -> Optional[int]:
    value = (args.get("employeeId") or "").strip()
    if not value:
        return None
    return require_employee_id(value)


def bool_arg(args: Mapping[str, str], name: str) -> bool:
    return (args.get(name) or "").strip().lower() in _TRUE_VALUES


def text_arg(args: Mapping[str, str], name: str) -> Optional[str]:
    value = (args.get(name) or "").strip()
    return value or None
