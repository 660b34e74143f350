from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Status


@dataclass(frozen=True)
class Company:
    company_id: int
    company_name: str
    company_status: Status
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.company_id,
            "company_name": self.company_name,
            "company_status": self.company_status.value,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
