"""JWT token creation and verification.

The API only verifies bearer tokens; create_access_token exists for
development scripts and tests that need a signed token.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from profile_api.core.config import get_settings
from profile_api.domain.exceptions import AuthenticationException


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Create a JWT access token with the given claims.

    Args:
        data: Claims to encode (e.g. sub, username, role).
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    to_encode = data.copy()
    if expires_delta is not None:
        expire = datetime.now(UTC) + expires_delta
    else:
        expire = datetime.now(UTC) + timedelta(
            minutes=settings.access_token_expire_minutes
        )
    to_encode["exp"] = expire
    encoded = jwt.encode(
        to_encode,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Enforces presence of exp. The principal is read from sub, falling back
    to a user_id claim for tokens issued by the legacy auth service.

    Args:
        token: JWT string (e.g. from Authorization header).

    Returns:
        Decoded payload dict.

    Raises:
        AuthenticationException: If token is invalid, expired, or carries no principal.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True},
        )
    except JWTError as e:
        raise AuthenticationException(f"Invalid token: {e!s}") from e
    if not payload.get("sub") and not payload.get("user_id"):
        raise AuthenticationException("Token missing required claim: sub")
    return payload


def principal_from_payload(payload: dict[str, Any]) -> str:
    """Return the principal identifier carried by a verified token payload."""
    return str(payload.get("sub") or payload["user_id"])
