from __future__ import annotations

from ..core.constants import DEFAULT_TOLERANCE_MINUTES, DEFAULT_WORK_END, DEFAULT_WORK_START
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, normalize_mysql_time
from .model import OrgScheduleDefaults
from .repository import CompanySettingsRepository


class MySQLCompanySettingsRepository(CompanySettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def fetch_org_schedule_defaults(self) -> OrgScheduleDefaults:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                SELECT work_start_time, work_end_time, tolerance_minutes
                FROM company_settings
                ORDER BY settings_id ASC
                LIMIT 1
                """
            )
            r = fetchone(cur)
            if not r:
                return OrgScheduleDefaults()
            tolerance = r.get("tolerance_minutes")
            return OrgScheduleDefaults(
                start_time=normalize_mysql_time(r.get("work_start_time")) or DEFAULT_WORK_START,
                end_time=normalize_mysql_time(r.get("work_end_time")) or DEFAULT_WORK_END,
                tolerance_minutes=DEFAULT_TOLERANCE_MINUTES if tolerance is None else int(tolerance),
            )
