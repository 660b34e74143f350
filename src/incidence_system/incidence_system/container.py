from __future__ import annotations

from dataclasses import dataclass

from .companies.service import CompanyService
from .companies.sql_company_repository import SqlCompanyRepository
from .database.connection import DatabaseConnection, DBConfig
from .employees.service import EmployeeService
from .employees.sql_employee_repository import SqlEmployeeRepository
from .incidents.service import IncidentService
from .incidents.sql_incident_repository import SqlIncidentRepository
from .movements.service import MovementService
from .movements.sql_movement_repository import SqlMovementRepository
from .movements.validator import MovementValidator
from .offices.service import OfficeService
from .offices.sql_office_repository import SqlOfficeRepository
from .periods.service import PeriodService
from .periods.sql_period_repository import SqlPeriodRepository
from .reports.service import PeriodExportService
from .security.office_scope import OfficeScopeResolver
from .security.tokens import TokenService
from .users.service import AuthService, UserService
from .users.sql_user_repository import SqlUserRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    companies_repo: SqlCompanyRepository
    offices_repo: SqlOfficeRepository
    employees_repo: SqlEmployeeRepository
    incidents_repo: SqlIncidentRepository
    periods_repo: SqlPeriodRepository
    users_repo: SqlUserRepository
    movements_repo: SqlMovementRepository

    token_service: TokenService
    auth_service: AuthService
    scope_resolver: OfficeScopeResolver
    company_service: CompanyService
    office_service: OfficeService
    employee_service: EmployeeService
    incident_service: IncidentService
    period_service: PeriodService
    user_service: UserService
    movement_service: MovementService
    export_service: PeriodExportService


def build_container(*, database_url: str, jwt_secret: str, session_hours: int = 24, echo_sql: bool = False) -> Container:
    conn = DatabaseConnection(DBConfig(url=database_url, echo=echo_sql))

    companies_repo = SqlCompanyRepository(conn)
    offices_repo = SqlOfficeRepository(conn)
    employees_repo = SqlEmployeeRepository(conn)
    incidents_repo = SqlIncidentRepository(conn)
    periods_repo = SqlPeriodRepository(conn)
    users_repo = SqlUserRepository(conn)
    movements_repo = SqlMovementRepository(conn)

    scope_resolver = OfficeScopeResolver(users_repo)
    validator = MovementValidator(periods_repo, employees_repo, incidents_repo, movements_repo)

    return Container(
        conn=conn,
        companies_repo=companies_repo,
        offices_repo=offices_repo,
        employees_repo=employees_repo,
        incidents_repo=incidents_repo,
        periods_repo=periods_repo,
        users_repo=users_repo,
        movements_repo=movements_repo,
        token_service=TokenService(jwt_secret, ttl_hours=session_hours),
        auth_service=AuthService(users_repo),
        scope_resolver=scope_resolver,
        company_service=CompanyService(companies_repo),
        office_service=OfficeService(offices_repo, companies_repo),
        employee_service=EmployeeService(employees_repo, offices_repo, scope_resolver),
        incident_service=IncidentService(incidents_repo),
        period_service=PeriodService(periods_repo),
        user_service=UserService(users_repo, companies_repo),
        movement_service=MovementService(movements_repo, validator, scope_resolver),
        export_service=PeriodExportService(periods_repo, movements_repo),
    )
