from __future__ import annotations

from dataclasses import dataclass

from .accounting.aggregator import PeriodAggregator
from .accounting.model import AccountingPolicy
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .closures.mysql_closure_repository import MySQLClosureRepository
from .closures.repository import ClosureRepository
from .closures.service import ClosureService
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import MonthReportService
from .vacations.mysql_vacation_repository import MySQLVacationRepository
from .vacations.repository import VacationRepository
from .vacations.service import VacationService


@dataclass(frozen=True)
class Container:
    policy: AccountingPolicy

    attendance_repo: AttendanceRepository
    closures_repo: ClosureRepository
    vacations_repo: VacationRepository

    attendance_service: AttendanceService
    report_service: MonthReportService
    closure_service: ClosureService
    vacation_service: VacationService


def wire_services(
    *,
    policy: AccountingPolicy,
    attendance_repo: AttendanceRepository,
    closures_repo: ClosureRepository,
    vacations_repo: VacationRepository,
) -> Container:
    """Build services over any repository implementations (MySQL or in-memory)."""
    aggregator = PeriodAggregator()
    report_service = MonthReportService(attendance_repo, policy, aggregator=aggregator)

    return Container(
        policy=policy,
        attendance_repo=attendance_repo,
        closures_repo=closures_repo,
        vacations_repo=vacations_repo,
        attendance_service=AttendanceService(attendance_repo, policy, aggregator=aggregator),
        report_service=report_service,
        closure_service=ClosureService(closures_repo, report_service),
        vacation_service=VacationService(vacations_repo),
    )


def build_container(*, db_config: dict, policy: AccountingPolicy) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_services(
        policy=policy,
        attendance_repo=MySQLAttendanceRepository(conn),
        closures_repo=MySQLClosureRepository(conn),
        vacations_repo=MySQLVacationRepository(conn),
    )
