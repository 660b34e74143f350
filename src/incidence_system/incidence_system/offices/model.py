from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Status


@dataclass(frozen=True)
class Office:
    office_id: int
    company_id: int
    office_name: str
    office_status: Status
    company_name: str = ""
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.office_id,
            "company_id": self.company_id,
            "company_name": self.company_name,
            "office_name": self.office_name,
            "office_status": self.office_status.value,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
