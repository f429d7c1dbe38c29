"""Security: JWT verification and password hashing."""

from profile_api.infrastructure.security.jwt import (
    create_access_token,
    principal_from_payload,
    verify_token,
)
from profile_api.infrastructure.security.password import get_password_hash, verify_password

__all__ = [
    "create_access_token",
    "get_password_hash",
    "principal_from_payload",
    "verify_password",
    "verify_token",
]
