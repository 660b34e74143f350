from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.catalog_service import CatalogService
from ..common.logging_config import get_logger
from ..common.repository import CrudRepository
from ..common.validators import (
    optional_positive_int,
    require_enum,
    require_min_length,
    require_non_empty,
    require_positive_int,
)
from ..companies.model import Company
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Resource, Role, Status
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from ..offices.model import Office
from .model import User
from .repository import UserRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we put into the signed session token after login."""

    user_id: int
    name: str
    email: str
    role: Role
    company_id: Optional[int] = None

    @classmethod
    def from_user(cls, user: User) -> "SessionUser":
        return cls(
            user_id=user.user_id,
            name=user.user_name,
            email=user.user_email,
            role=user.user_role,
            company_id=user.company_id,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.user_id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "role_label": self.role.label,
            "company_id": self.company_id,
        }


class AuthService:
    """Use case: authenticate user (login) and re-check the user behind a token."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: Optional[str], password: Optional[str]) -> SessionUser:
        if not email or not password:
            raise ValidationError("Email y contraseña son requeridos")

        user = self._users.get_by_email(email)
        if not user or not user.is_active:
            raise AuthenticationError("Credenciales inválidas")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.warning("failed login for %s", email)
            raise AuthenticationError("Credenciales inválidas")

        logger.info("user %s logged in", user.user_id)
        return SessionUser.from_user(user)

    def current_user(self, user_id: int) -> User:
        user = self._users.get_by_id(user_id)
        if not user or not user.is_active:
            raise AuthenticationError("Sesión inválida")
        return user

    def offices_for(self, user_id: int) -> Sequence[Office]:
        return self._users.list_offices(user_id)


def _office_ids(value: Any) -> list[int]:
    if value is None or value == "":
        return []
    if isinstance(value, str):
        value = [part for part in value.split(",") if part.strip()]
    if not isinstance(value, Iterable):
        raise ValidationError("Oficinas inválidas")
    return [require_positive_int(v, "Oficina") for v in value]


class UserService(CatalogService[User]):
    """Use case: manage dashboard users (super admin only)."""

    resource = Resource.USERS
    not_found_message = "Usuario no encontrado"

    def __init__(self, users: UserRepository, companies: CrudRepository[Company]):
        super().__init__(users)
        self._companies = companies

    def parse(self, payload: Mapping[str, Any]) -> dict:
        email = require_non_empty(payload.get("user_email"), "Email").lower()
        if "@" not in email:
            raise ValidationError("Email inválido")

        values = {
            "user_name": require_non_empty(payload.get("user_name"), "Nombre"),
            "user_email": email,
            "user_role": require_enum(payload.get("user_role"), Role, "Rol"),
            "user_status": require_enum(payload.get("user_status", Status.ACTIVE.value), Status, "Estatus"),
            "company_id": optional_positive_int(payload.get("company_id"), "Empresa"),
            "office_ids": _office_ids(payload.get("office_ids")),
        }

        password = payload.get("user_password")
        if password:
            require_min_length(password, "Contraseña", MIN_PASSWORD_LENGTH)
            values["password_hash"] = generate_password_hash(password)
        return values

    def check_references(self, values: dict) -> None:
        company_id = values.get("company_id")
        if company_id is not None and self._companies.get_by_id(company_id) is None:
            raise NotFoundError("Empresa no encontrada")

    def create(self, *, current_role: Role, payload: Mapping[str, Any]) -> User:
        if not payload.get("user_password"):
            raise ValidationError("Contraseña es requerida")
        return super().create(current_role=current_role, payload=payload)

    def delete(self, *, current_role: Role, entity_id: int, current_user_id: Optional[int] = None) -> None:
        if current_user_id is not None and int(entity_id) == int(current_user_id):
            raise ValidationError("No puedes eliminar tu propio usuario")
        super().delete(current_role=current_role, entity_id=entity_id)

