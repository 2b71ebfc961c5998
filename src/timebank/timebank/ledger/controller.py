from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import day_bounds, now_local, parse_iso_date
from ..common.http_utils import (
    bool_arg,
    date_range_from_args,
    json_error,
    optional_employee_id,
    text_arg,
)
from ..common.validators import require_employee_id
from ..core.enums import BankStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from ..employees.model import EmployeeFilter

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _today():
        # Read once per request so a range never crosses midnight mid-computation.
        return now_local(container.org_timezone).date()

    @app.route("/api/time-bank", methods=["GET"], endpoint="api_time_bank")
    def api_time_bank():
        """Time bank summary; ``detailed=true`` adds the per-day list.

        Without ``employeeId`` the summary covers every active employee.
        """
        try:
            today = _today()
            start, end = date_range_from_args(request.args, today=today)
            data = container.report_service.build_time_bank_report(
                start=start,
                end=end,
                as_of=today,
                employee_id=optional_employee_id(request.args),
                detailed=bool_arg(request.args, "detailed"),
            )
            return jsonify({"success": True, "data": data}), 200
        except ValidationError as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            logger.exception("time bank request failed")
            return json_error("Internal server error", 500)

    @app.route("/api/time-bank/employees", methods=["GET"], endpoint="api_time_bank_employees")
    def api_time_bank_employees():
        try:
            today = _today()
            start, end = date_range_from_args(request.args, today=today)

            status_s = text_arg(request.args, "status")
            try:
                status = BankStatus(status_s.lower()) if status_s else None
            except ValueError:
                raise ValidationError(f"Invalid status: {status_s!r}")

            filters = EmployeeFilter(
                search=text_arg(request.args, "search"),
                department=text_arg(request.args, "department"),
                position=text_arg(request.args, "position"),
                cost_center=text_arg(request.args, "costCenter"),
                client=text_arg(request.args, "client"),
            )
            data = container.report_service.build_bank_hours_overview(
                start=start, end=end, as_of=today, filters=filters, status=status
            )
            return jsonify({"success": True, "data": data.rows, **data.summary}), 200
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            logger.exception("bank hours overview failed")
            return json_error("Internal server error", 500)

    @app.route("/api/time-bank/<int:employee_id>/days/<day>", methods=["GET"], endpoint="api_time_bank_day")
    def api_time_bank_day(employee_id: int, day: str):
        try:
            employee_id = require_employee_id(employee_id)
            work_date = parse_iso_date(day)
            if container.employees_repo.get_by_id(employee_id) is None:
                raise NotFoundError(f"Employee {employee_id} not found")

            punches = container.punches_repo.fetch_punches(employee_id, *day_bounds(work_date))
            entry = container.resolver.resolve_day(employee_id, work_date, punches)
            return jsonify({"success": True, "data": entry.to_dict()}), 200
        except ValidationError as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            logger.exception("day resolution failed")
            return json_error("Internal server error", 500)

    @app.route("/api/attendance/period", methods=["GET"], endpoint="api_attendance_period")
    def api_attendance_period():
        try:
            employee_id = optional_employee_id(request.args)
            if employee_id is None:
                raise ValidationError("employeeId is required")
            if container.employees_repo.get_by_id(employee_id) is None:
                raise NotFoundError(f"Employee {employee_id} not found")

            start, end = date_range_from_args(request.args, today=_today())
            schedule = container.settings_repo.fetch_org_schedule_defaults()
            ledger = container.aggregator.aggregate_period(employee_id, start, end, schedule=schedule)
            return jsonify({"success": True, "data": ledger.to_dict()}), 200
        except ValidationError as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            logger.exception("period aggregation failed")
            return json_error("Internal server error", 500)
