"""SQLAlchemy table mappings.

Repositories translate these rows into the frozen domain dataclasses of each
feature module; services never see ORM objects.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import Date, DateTime, Enum, ForeignKey, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship, validates

from ..core.enums import EmployeeType, Role, Status


def _status_column() -> Mapped[Status]:
    return mapped_column(Enum(Status, native_enum=False, length=20), nullable=False, default=Status.ACTIVE)


class Base(DeclarativeBase):
    pass


class CompanyRow(Base):
    __tablename__ = "companies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company_name: Mapped[str] = mapped_column(String(150), nullable=False)
    company_status: Mapped[Status] = _status_column()
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, server_default=func.now())

    offices: Mapped[List["OfficeRow"]] = relationship(back_populates="company", passive_deletes="all")


class OfficeRow(Base):
    __tablename__ = "offices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company_id: Mapped[int] = mapped_column(ForeignKey("companies.id", ondelete="RESTRICT"), nullable=False)
    office_name: Mapped[str] = mapped_column(String(150), nullable=False)
    office_status: Mapped[Status] = _status_column()
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, server_default=func.now())

    company: Mapped[CompanyRow] = relationship(back_populates="offices")


class UserRow(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company_id: Mapped[Optional[int]] = mapped_column(ForeignKey("companies.id", ondelete="RESTRICT"))
    user_name: Mapped[str] = mapped_column(String(150), nullable=False)
    user_email: Mapped[str] = mapped_column(String(190), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    user_status: Mapped[Status] = _status_column()
    user_role: Mapped[Role] = mapped_column(Enum(Role, native_enum=False, length=30), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, server_default=func.now())

    offices: Mapped[List[OfficeRow]] = relationship(secondary="user_offices", order_by="OfficeRow.office_name")


class UserOfficeRow(Base):
    __tablename__ = "user_offices"

    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    office_id: Mapped[int] = mapped_column(ForeignKey("offices.id", ondelete="RESTRICT"), primary_key=True)


class EmployeeRow(Base):
    __tablename__ = "employees"
    __table_args__ = (UniqueConstraint("office_id", "employee_code", name="uq_employee_office_code"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    office_id: Mapped[int] = mapped_column(ForeignKey("offices.id", ondelete="RESTRICT"), nullable=False)
    employee_code: Mapped[int] = mapped_column(Integer, nullable=False)
    employee_name: Mapped[str] = mapped_column(String(150), nullable=False)
    employee_type: Mapped[EmployeeType] = mapped_column(
        Enum(EmployeeType, native_enum=False, length=20), nullable=False
    )
    employee_status: Mapped[Status] = _status_column()
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, server_default=func.now())

    office: Mapped[OfficeRow] = relationship()


class IncidentRow(Base):
    __tablename__ = "incidents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    incident_code: Mapped[str] = mapped_column(String(30), nullable=False, unique=True)
    incident_name: Mapped[str] = mapped_column(String(150), nullable=False)
    incident_status: Mapped[Status] = _status_column()
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, server_default=func.now())


class PeriodRow(Base):
    __tablename__ = "periods"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    period_name: Mapped[str] = mapped_column(String(100), nullable=False)
    period_start: Mapped[date] = mapped_column(Date, nullable=False)
    period_end: Mapped[date] = mapped_column(Date, nullable=False)
    period_status: Mapped[Status] = _status_column()
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, server_default=func.now())


class MovementRow(Base):
    __tablename__ = "movements"
    # active_key is 1 for ACTIVE rows and NULL otherwise; NULLs never collide,
    # so only one ACTIVE row per triple can exist.
    __table_args__ = (
        UniqueConstraint("period_id", "employee_id", "incident_id", "active_key", name="uq_movement_active_triple"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    period_id: Mapped[int] = mapped_column(ForeignKey("periods.id", ondelete="RESTRICT"), nullable=False)
    employee_id: Mapped[int] = mapped_column(ForeignKey("employees.id", ondelete="RESTRICT"), nullable=False)
    incident_id: Mapped[int] = mapped_column(ForeignKey("incidents.id", ondelete="RESTRICT"), nullable=False)
    incidence_date: Mapped[date] = mapped_column(Date, nullable=False)
    incidence_observation: Mapped[str] = mapped_column(Text, nullable=False, default="")
    incidence_status: Mapped[Status] = _status_column()
    active_key: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )

    period: Mapped[PeriodRow] = relationship()
    employee: Mapped[EmployeeRow] = relationship()
    incident: Mapped[IncidentRow] = relationship()

    def __init__(self, **kwargs):
        kwargs.setdefault("incidence_status", Status.ACTIVE)
        super().__init__(**kwargs)

    @validates("incidence_status")
    def _sync_active_key(self, _key, value):
        self.active_key = 1 if value == Status.ACTIVE else None
        return value
