"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the principal identifier, DB sessions and
the profile service. Routes depend only on these, not on infrastructure.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.application.services.profile_service import ProfileService
from profile_api.domain.exceptions import AuthenticationException
from profile_api.infrastructure.persistence.database import get_db, get_db_transactional
from profile_api.infrastructure.persistence.repositories import ProfileRepository
from profile_api.infrastructure.security.jwt import principal_from_payload, verify_token
from profile_api.infrastructure.security.password import (
    get_password_hash,
    verify_password,
)

logger = logging.getLogger(__name__)

_http_bearer = HTTPBearer(auto_error=False)


class PasswordHasher:
    """Password hashing provided via DI (no direct infra imports in services)."""

    def hash_password(self, password: str) -> str:
        return get_password_hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return verify_password(plain_password, hashed_password)


def get_password_hasher() -> PasswordHasher:
    """Password hasher (composition root)."""
    return PasswordHasher()


def get_principal_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> str | None:
    """Return the authenticated principal id from the bearer JWT, or None.

    The handler receives the result as an explicit argument and decides how
    to answer an unauthenticated request.
    """
    if not credentials:
        return None
    try:
        payload = verify_token(credentials.credentials)
    except AuthenticationException as e:
        logger.debug("Rejected bearer token: %s", e.message)
        return None
    return principal_from_payload(payload)


async def get_profile_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    password_hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> ProfileService:
    """Profile service on a read session (GET)."""
    return ProfileService(ProfileRepository(db), password_hasher)


async def get_profile_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    password_hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> ProfileService:
    """Profile service on a transactional session (PUT)."""
    return ProfileService(ProfileRepository(db), password_hasher)
