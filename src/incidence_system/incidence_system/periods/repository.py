from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ..common.repository import CrudRepository
from .model import Period


class PeriodRepository(CrudRepository[Period], Protocol):
    def get_current(self, *, on: date) -> Optional[Period]:
        """ACTIVE period whose range contains ``on``; the latest start wins."""

        raise NotImplementedError
