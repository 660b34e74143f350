from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, Optional, Protocol, Sequence

from ..database.pagination import Page, PageRequest
from .model import Movement, MovementDraft


class MovementRepository(Protocol):
    """Repository interface for movements.

    Note (DIP): the validator and service depend on this interface only.
    """

    def get_by_id(self, movement_id: int) -> Optional[Movement]:
        raise NotImplementedError

    def exists_active(
        self,
        *,
        period_id: int,
        employee_id: int,
        incident_id: int,
        exclude_id: Optional[int] = None,
    ) -> bool:
        raise NotImplementedError

    def create(self, draft: MovementDraft) -> Movement:
        """Insert an ACTIVE movement. Raises DuplicateError if the active triple is taken."""

        raise NotImplementedError

    def update(self, movement_id: int, draft: MovementDraft) -> Optional[Movement]:
        """Replace the movement's values and force it ACTIVE. Returns None when missing."""

        raise NotImplementedError

    def delete_by_id(self, movement_id: int) -> bool:
        raise NotImplementedError

    def list_page(
        self,
        request: PageRequest,
        *,
        office_ids: Optional[FrozenSet[int]] = None,
        period_id: Optional[int] = None,
    ) -> Page[Movement]:
        raise NotImplementedError

    def count_active_by_period(self, period_ids: Iterable[int]) -> Dict[int, int]:
        raise NotImplementedError

    def list_active_for_period(self, period_id: int) -> Sequence[Movement]:
        raise NotImplementedError
