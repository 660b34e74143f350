from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from ..core.enums import Role, Status


@dataclass(frozen=True)
class User:
    """Domain entity: dashboard user.

    Note: plain data object, no DB access code here.
    """

    user_id: int
    company_id: Optional[int]
    user_name: str
    user_email: str
    password_hash: str
    user_role: Role
    user_status: Status = Status.ACTIVE
    office_ids: Tuple[int, ...] = ()
    created_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.user_status == Status.ACTIVE

    def to_dict(self) -> dict:
        return {
            "id": self.user_id,
            "company_id": self.company_id,
            "user_name": self.user_name,
            "user_email": self.user_email,
            "user_role": self.user_role.value,
            "user_role_label": self.user_role.label,
            "user_status": self.user_status.value,
            "office_ids": list(self.office_ids),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
