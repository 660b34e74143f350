from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for authorization and office scoping."""

    SUPER_ADMIN = "SUPER_ADMIN"
    ENCARGADO_RRHH = "ENCARGADO_RRHH"
    SUPERVISOR_REGIONES = "SUPERVISOR_REGIONES"
    ENCARGADO_CASINO = "ENCARGADO_CASINO"

    @property
    def label(self) -> str:
        return ROLE_LABELS[self]

    @property
    def is_top(self) -> bool:
        return self is Role.SUPER_ADMIN


ROLE_LABELS = {
    Role.SUPER_ADMIN: "Super Administrador",
    Role.ENCARGADO_RRHH: "Administrador de personal",
    Role.SUPERVISOR_REGIONES: "Gerente de zona",
    Role.ENCARGADO_CASINO: "Recursos Humanos de sucursal",
}


class Status(str, Enum):
    """Lifecycle status shared by every catalog entity and movements."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class EmployeeType(str, Enum):
    SINDICALIZADO = "SINDICALIZADO"
    CONFIANZA = "CONFIANZA"


class Resource(str, Enum):
    DASHBOARD = "dashboard"
    COMPANIES = "companies"
    OFFICES = "offices"
    EMPLOYEES = "employees"
    INCIDENTS = "incidents"
    PERIODS = "periods"
    USERS = "users"
    MOVEMENTS = "movements"
    REPORTS = "reports"


class Action(str, Enum):
    VIEW = "view"
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"
    FILTER_OFFICE = "filter_office"
    EXPORT = "export"
