from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import Status


@dataclass(frozen=True)
class Period:
    """Administrative date range (e.g. a payroll cycle). Both ends are inclusive."""

    period_id: int
    period_name: str
    period_start: date
    period_end: date
    period_status: Status
    created_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.period_status == Status.ACTIVE

    def contains(self, day: date) -> bool:
        return self.period_start <= day <= self.period_end

    def to_dict(self) -> dict:
        return {
            "id": self.period_id,
            "period_name": self.period_name,
            "period_start": self.period_start.isoformat(),
            "period_end": self.period_end.isoformat(),
            "period_status": self.period_status.value,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
