from __future__ import annotations

from typing import FrozenSet, Optional, Protocol, Sequence

from ..common.repository import CrudRepository
from ..offices.model import Office
from .model import User


class UserRepository(CrudRepository[User], Protocol):
    """Repository interface for User.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    ``create``/``update`` accept an ``office_ids`` value that replaces the user's office links.
    """

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def get_office_ids(self, user_id: int) -> FrozenSet[int]:
        raise NotImplementedError

    def list_offices(self, user_id: int) -> Sequence[Office]:
        raise NotImplementedError
