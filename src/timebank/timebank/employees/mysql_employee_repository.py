from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee, EmployeeFilter
from .repository import EmployeeRepository

_COLUMNS = """
    employee_id, employee_code, full_name, cpf, department, position,
    cost_center, client, hire_date, is_active
"""


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        employee_code=r["employee_code"],
        full_name=r["full_name"],
        hire_date=r["hire_date"],
        cpf=r.get("cpf"),
        department=r.get("department"),
        position=r.get("position"),
        cost_center=r.get("cost_center"),
        client=r.get("client"),
        is_active=bool(r.get("is_active", True)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            if not r:
                return None
            return _to_employee(r)

    def fetch_hire_date(self, employee_id: int) -> Optional[date]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute("SELECT hire_date FROM employees WHERE employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            return r["hire_date"] if r else None

    def list_active(self, filters: Optional[EmployeeFilter] = None) -> Sequence[Employee]:
        filters = filters or EmployeeFilter()
        clauses = ["is_active=1"]
        params: list[object] = []

        if filters.search:
            clauses.append("(full_name LIKE %s OR cpf LIKE %s)")
            params.extend([f"%{filters.search}%", f"%{filters.search}%"])
        for column, value in (
            ("department", filters.department),
            ("position", filters.position),
            ("cost_center", filters.cost_center),
            ("client", filters.client),
        ):
            if value:
                clauses.append(f"{column} LIKE %s")
                params.append(f"%{value}%")

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE {where} ORDER BY full_name ASC",
                tuple(params),
            )
            return [_to_employee(r) for r in fetchall(cur)]
