from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ForbiddenError
from ..users.repository import UserRepository


@dataclass(frozen=True)
class OfficeScope:
    """Offices a request may read; ``office_ids is None`` means unrestricted."""

    office_ids: Optional[FrozenSet[int]] = None

    @property
    def is_unrestricted(self) -> bool:
        return self.office_ids is None

    def allows(self, office_id: int) -> bool:
        return self.office_ids is None or int(office_id) in self.office_ids


def build_office_scope(
    *,
    role: Role,
    linked_office_ids: Iterable[int],
    requested_office_id: Optional[int] = None,
) -> OfficeScope:
    """Top role sees everything; other roles only their linked offices.

    An explicit office filter narrows the scope but never widens it.
    """
    if role.is_top:
        if requested_office_id is None:
            return OfficeScope()
        return OfficeScope(frozenset({int(requested_office_id)}))

    linked = frozenset(int(i) for i in linked_office_ids)
    if not linked:
        raise ForbiddenError("No tienes oficinas asignadas")

    if requested_office_id is None:
        return OfficeScope(linked)
    if int(requested_office_id) not in linked:
        raise ForbiddenError("No tienes acceso a la oficina solicitada")
    return OfficeScope(frozenset({int(requested_office_id)}))


class OfficeScopeResolver:
    """Resolves the scope from the stored user, not from the token claims."""

    def __init__(self, users: UserRepository):
        self._users = users

    def resolve(self, *, user_id: int, requested_office_id: Optional[int] = None) -> OfficeScope:
        user = self._users.get_by_id(int(user_id))
        if user is None or not user.is_active:
            raise AuthenticationError("Sesión inválida")
        linked = () if user.user_role.is_top else self._users.get_office_ids(user.user_id)
        return build_office_scope(
            role=user.user_role,
            linked_office_ids=linked,
            requested_office_id=requested_office_id,
        )
