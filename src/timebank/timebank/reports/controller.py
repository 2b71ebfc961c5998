from __future__ import annotations

import csv
import io
import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.http_utils import date_range_from_args, json_error, optional_employee_id, text_arg
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from .service import ReportData

logger = logging.getLogger(__name__)

_ATTENDANCE_CSV_FIELDS = [
    "employeeId",
    "employeeCode",
    "employeeName",
    "department",
    "position",
    "totalDays",
    "presentDays",
    "absentDays",
    "totalHours",
    "regularHours",
    "overtimeHours",
    "averageHoursPerDay",
    "lateArrivals",
    "earlyDepartures",
    "attendanceRate",
]


def register(app: Flask, container: Container) -> None:
    def _write_report_csv(*, data: ReportData, filename: str):
        """Write report rows to CSV response."""

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=_ATTENDANCE_CSV_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for row in data.rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    def _attendance_data() -> ReportData:
        today = now_local(container.org_timezone).date()
        start, end = date_range_from_args(request.args, today=today)
        return container.report_service.build_attendance_report(
            start=start,
            end=end,
            department=text_arg(request.args, "department"),
            employee_id=optional_employee_id(request.args),
        )

    @app.route("/api/reports/attendance", methods=["GET"], endpoint="api_report_attendance")
    def api_report_attendance():
        try:
            data = _attendance_data()
            return jsonify({"success": True, "data": data.rows, **data.summary}), 200
        except ValidationError as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            logger.exception("attendance report failed")
            return json_error("Internal server error", 500)

    @app.route("/api/reports/attendance.csv", methods=["GET"], endpoint="api_report_attendance_csv")
    def api_report_attendance_csv():
        try:
            data = _attendance_data()
        except ValidationError as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            logger.exception("attendance report export failed")
            return json_error("Internal server error", 500)

        period = data.summary["period"]
        filename = f"attendance_report_{period['startDate'].replace('-', '')}_{period['endDate'].replace('-', '')}.csv"
        return _write_report_csv(data=data, filename=filename)

    @app.route("/api/reports/late-arrivals", methods=["GET"], endpoint="api_report_late_arrivals")
    def api_report_late_arrivals():
        try:
            today = now_local(container.org_timezone).date()
            start, end = date_range_from_args(request.args, today=today)
            data = container.report_service.build_late_arrivals_report(
                start=start, end=end, department=text_arg(request.args, "department")
            )
            return jsonify({"success": True, "data": data.rows, **data.summary}), 200
        except ValidationError as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            logger.exception("late arrivals report failed")
            return json_error("Internal server error", 500)
