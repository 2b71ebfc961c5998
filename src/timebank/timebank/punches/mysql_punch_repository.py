from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import day_bounds
from ..common.wallclock import LocalWallClock
from ..core.enums import PunchType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import PunchEvent
from .repository import PunchRepository


def _stored_timestamp(value) -> datetime:
    # The pure-Python connector can hand DATETIME back as text.
    if isinstance(value, str):
        return LocalWallClock.parse(value).as_naive()
    return value


def _to_punch(r: dict) -> PunchEvent:
    return PunchEvent(
        record_id=int(r["record_id"]),
        employee_id=int(r["employee_id"]),
        kind=PunchType(r["type"]),
        timestamp=_stored_timestamp(r["timestamp"]),
        is_valid=bool(r.get("is_valid", True)),
    )


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def fetch_punches(self, employee_id: int, day_start: datetime, day_end: datetime) -> Sequence[PunchEvent]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                SELECT record_id, employee_id, type, timestamp, is_valid
                FROM time_records
                WHERE employee_id=%s AND timestamp BETWEEN %s AND %s
                ORDER BY timestamp ASC, record_id ASC
                """,
                (int(employee_id), day_start, day_end),
            )
            return [_to_punch(r) for r in fetchall(cur)]

    def list_employee_ids_with_punches(
        self,
        *,
        start: date,
        end: date,
        department: Optional[str] = None,
        employee_id: Optional[int] = None,
    ) -> Sequence[int]:
        range_start, _ = day_bounds(start)
        _, range_end = day_bounds(end)
        clauses = ["tr.timestamp BETWEEN %s AND %s", "tr.is_valid=1"]
        params: list[object] = [range_start, range_end]

        if department:
            clauses.append("e.department LIKE %s")
            params.append(f"%{department}%")
        if employee_id is not None:
            clauses.append("e.employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                f"""
                SELECT DISTINCT e.employee_id
                FROM time_records tr
                JOIN employees e ON e.employee_id = tr.employee_id
                WHERE {where}
                ORDER BY e.employee_id ASC
                """,
                tuple(params),
            )
            return [int(r["employee_id"]) for r in fetchall(cur)]

    def list_entry_punches(
        self,
        *,
        start: date,
        end: date,
        department: Optional[str] = None,
    ) -> Sequence[PunchEvent]:
        range_start, _ = day_bounds(start)
        _, range_end = day_bounds(end)
        clauses = ["tr.type=%s", "tr.timestamp BETWEEN %s AND %s", "tr.is_valid=1"]
        params: list[object] = [PunchType.ENTRY.value, range_start, range_end]

        if department:
            clauses.append("e.department LIKE %s")
            params.append(f"%{department}%")

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                f"""
                SELECT tr.record_id, tr.employee_id, tr.type, tr.timestamp, tr.is_valid
                FROM time_records tr
                JOIN employees e ON e.employee_id = tr.employee_id
                WHERE {where}
                ORDER BY tr.timestamp ASC
                """,
                tuple(params),
            )
            return [_to_punch(r) for r in fetchall(cur)]
