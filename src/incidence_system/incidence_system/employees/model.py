from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import EmployeeType, Status


@dataclass(frozen=True)
class Employee:
    employee_id: int
    office_id: int
    employee_code: int
    employee_name: str
    employee_type: EmployeeType
    employee_status: Status
    office_name: str = ""
    created_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.employee_status == Status.ACTIVE

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "office_id": self.office_id,
            "office_name": self.office_name,
            "employee_code": self.employee_code,
            "employee_name": self.employee_name,
            "employee_type": self.employee_type.value,
            "employee_status": self.employee_status.value,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
