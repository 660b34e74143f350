from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Status


@dataclass(frozen=True)
class Incident:
    """A type of HR event (absence, bonus, ...) applied to employees through movements."""

    incident_id: int
    incident_code: str
    incident_name: str
    incident_status: Status
    created_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.incident_status == Status.ACTIVE

    def to_dict(self) -> dict:
        return {
            "id": self.incident_id,
            "incident_code": self.incident_code,
            "incident_name": self.incident_name,
            "incident_status": self.incident_status.value,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
