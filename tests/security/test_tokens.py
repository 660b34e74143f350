from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from src.incidence_system.incidence_system.core.enums import Role
from src.incidence_system.incidence_system.core.exceptions import AuthenticationError
from src.incidence_system.incidence_system.security.tokens import TokenService
from src.incidence_system.incidence_system.users.service import SessionUser

USER = SessionUser(user_id=7, name="Ana", email="ana@example.com", role=Role.ENCARGADO_RRHH, company_id=3)


def test_issued_token_round_trips_claims():
    tokens = TokenService("secret", ttl_hours=24)

    restored = tokens.verify(tokens.issue(USER))

    assert restored == USER


def test_token_carries_expected_claims():
    tokens = TokenService("secret", ttl_hours=24)
    now = datetime(2024, 7, 1, tzinfo=timezone.utc)

    payload = jwt.decode(
        tokens.issue(USER, now=now),
        "secret",
        algorithms=["HS256"],
        options={"verify_exp": False},
    )

    assert payload["sub"] == "7"
    assert payload["role"] == "ENCARGADO_RRHH"
    assert payload["exp"] - payload["iat"] == 24 * 3600


def test_expired_token_is_rejected():
    tokens = TokenService("secret", ttl_hours=1)
    token = tokens.issue(USER, now=datetime.now(timezone.utc) - timedelta(hours=2))

    with pytest.raises(AuthenticationError):
        tokens.verify(token)


def test_token_signed_with_other_secret_is_rejected():
    token = TokenService("other").issue(USER)

    with pytest.raises(AuthenticationError):
        TokenService("secret").verify(token)


@pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
def test_missing_or_garbage_token_is_rejected(token):
    with pytest.raises(AuthenticationError):
        TokenService("secret").verify(token)


def test_empty_secret_is_a_configuration_error():
    with pytest.raises(RuntimeError):
        TokenService("")
