from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_ORG_TIMEZONE
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_company_settings_repository import MySQLCompanySettingsRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import CompanySettingsRepository, EmployeeRepository
from .ledger.aggregator import PeriodAggregator
from .ledger.resolver import DailyHourResolver
from .ledger.time_bank import TimeBankCalculator
from .punches.mysql_punch_repository import MySQLPunchRepository
from .punches.repository import PunchRepository
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]
    org_timezone: str

    employees_repo: EmployeeRepository
    settings_repo: CompanySettingsRepository
    punches_repo: PunchRepository

    resolver: DailyHourResolver
    aggregator: PeriodAggregator
    time_bank: TimeBankCalculator
    report_service: ReportService


def wire_container(
    *,
    employees_repo: EmployeeRepository,
    settings_repo: CompanySettingsRepository,
    punches_repo: PunchRepository,
    org_timezone: str = DEFAULT_ORG_TIMEZONE,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build services on top of any repository implementations."""

    resolver = DailyHourResolver()
    aggregator = PeriodAggregator(punches_repo, resolver=resolver)
    time_bank = TimeBankCalculator(punches_repo, employees_repo, resolver=resolver)
    report_service = ReportService(
        employees=employees_repo,
        settings=settings_repo,
        punches=punches_repo,
        aggregator=aggregator,
        time_bank=time_bank,
    )

    return Container(
        conn=conn,
        org_timezone=org_timezone,
        employees_repo=employees_repo,
        settings_repo=settings_repo,
        punches_repo=punches_repo,
        resolver=resolver,
        aggregator=aggregator,
        time_bank=time_bank,
        report_service=report_service,
    )


def build_container(*, db_config: dict, org_timezone: str = DEFAULT_ORG_TIMEZONE) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_container(
        employees_repo=MySQLEmployeeRepository(conn),
        settings_repo=MySQLCompanySettingsRepository(conn),
        punches_repo=MySQLPunchRepository(conn),
        org_timezone=org_timezone,
        conn=conn,
    )
