"""Unit tests for JWT verification and principal extraction."""

from datetime import timedelta

import pytest
from jose import jwt

from profile_api.core.config import get_settings
from profile_api.domain.exceptions import AuthenticationException
from profile_api.infrastructure.security.jwt import (
    create_access_token,
    principal_from_payload,
    verify_token,
)


def test_verify_token_round_trips_claims() -> None:
    token = create_access_token({"sub": "42", "role": "admin"})
    payload = verify_token(token)
    assert payload["sub"] == "42"
    assert payload["role"] == "admin"
    assert "exp" in payload


def test_verify_token_rejects_expired() -> None:
    token = create_access_token({"sub": "42"}, expires_delta=timedelta(seconds=-1))
    with pytest.raises(AuthenticationException) as exc_info:
        verify_token(token)
    assert exc_info.value.error_code == "AUTHENTICATION_ERROR"


def test_verify_token_rejects_wrong_signature() -> None:
    token = jwt.encode({"sub": "42", "exp": 4102444800}, "some-other-key", algorithm="HS256")
    with pytest.raises(AuthenticationException):
        verify_token(token)


def test_verify_token_requires_exp() -> None:
    settings = get_settings()
    token = jwt.encode(
        {"sub": "42"}, settings.secret_key.get_secret_value(), algorithm=settings.algorithm
    )
    with pytest.raises(AuthenticationException):
        verify_token(token)


def test_verify_token_requires_principal_claim() -> None:
    token = create_access_token({"username": "alice"})
    with pytest.raises(AuthenticationException, match="sub"):
        verify_token(token)


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"sub": "42"}, "42"),
        ({"user_id": 7}, "7"),
        ({"sub": "a1", "user_id": "b2"}, "a1"),
    ],
)
def test_principal_from_payload(payload: dict, expected: str) -> None:
    assert principal_from_payload(payload) == expected
