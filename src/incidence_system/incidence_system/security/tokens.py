"""
Session tokens: HS256 JWTs carried in an httpOnly cookie.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from ..core.constants import DEFAULT_SESSION_HOURS
from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from ..users.service import SessionUser

JWT_ALGORITHM = "HS256"


class TokenService:
    def __init__(self, secret: str, *, ttl_hours: int = DEFAULT_SESSION_HOURS):
        if not secret:
            raise RuntimeError("JWT_SECRET or SECRET_KEY must be configured")
        self._secret = secret
        self._ttl = timedelta(hours=int(ttl_hours))

    @property
    def ttl_seconds(self) -> int:
        return int(self._ttl.total_seconds())

    def issue(self, user: SessionUser, *, now: Optional[datetime] = None) -> str:
        """
        Create a signed token for the user.

        Args:
            user: Authenticated session user
            now: Issue time (defaults to current UTC time)

        Returns:
            Encoded JWT string
        """
        now = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(user.user_id),
            "iat": now,
            "exp": now + self._ttl,
            "name": user.name,
            "email": user.email,
            "role": user.role.value,
            "company_id": user.company_id,
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)

    def verify(self, token: Optional[str]) -> SessionUser:
        if not token:
            raise AuthenticationError("No autenticado")
        try:
            payload = jwt.decode(token, self._secret, algorithms=[JWT_ALGORITHM])
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("La sesión expiró")
        except jwt.InvalidTokenError:
            raise AuthenticationError("Token inválido")

        try:
            return SessionUser(
                user_id=int(payload["sub"]),
                name=str(payload.get("name") or ""),
                email=str(payload.get("email") or ""),
                role=Role(payload["role"]),
                company_id=payload.get("company_id"),
            )
        except (KeyError, ValueError):
            raise AuthenticationError("Token inválido")
