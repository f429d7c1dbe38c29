"""Profile application service: read and update the caller's own users row.

Every method returns a discriminated outcome (see application.dtos.profile)
instead of raising. Persistence failures are logged here with the principal
id and returned as OperationFailed.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from profile_api.application.dtos.profile import (
    EmailAlreadyInUse,
    InvalidCurrentPassword,
    OperationFailed,
    PasswordChange,
    ProfileFound,
    ProfileLookup,
    ProfileNotFound,
    ProfileUpdate,
    WeakPassword,
)
from profile_api.application.interfaces.repositories import IProfileRepository
from profile_api.application.services.password_policy import (
    exceeds_max_bytes,
    missing_requirements,
)
from profile_api.domain.exceptions import DuplicateEmailException

logger = logging.getLogger(__name__)

# Connection errors may surface unwrapped from the driver during connect.
_PERSISTENCE_ERRORS = (SQLAlchemyError, OSError)


class ProfileService:
    """Get profile, update profile, change password for one principal."""

    def __init__(self, profile_repo: IProfileRepository, password_hasher: Any) -> None:
        self._profile_repo = profile_repo
        self._password_hasher = password_hasher

    async def get_profile(self, user_id: str) -> ProfileLookup:
        """Run the single-row profile lookup for user_id."""
        try:
            profile = await self._profile_repo.get_profile(user_id)
        except _PERSISTENCE_ERRORS as e:
            logger.error("Profile lookup failed for user %s: %s", user_id, e)
            return OperationFailed(detail=str(e))
        if profile is None:
            return ProfileNotFound()
        return ProfileFound(profile=profile)

    async def update_profile(
        self,
        user_id: str,
        first_name: str,
        last_name: str,
        email: str,
    ) -> ProfileUpdate:
        """Update name and email. Email must not belong to another user."""
        try:
            if await self._profile_repo.email_taken_by_other(email, user_id):
                return EmailAlreadyInUse()
            profile = await self._profile_repo.update_profile(
                user_id,
                first_name=first_name,
                last_name=last_name,
                email=email,
            )
        except DuplicateEmailException:
            # Lost a race with a concurrent update between check and write.
            return EmailAlreadyInUse()
        except _PERSISTENCE_ERRORS as e:
            logger.error("Profile update failed for user %s: %s", user_id, e)
            return OperationFailed(detail=str(e))
        if profile is None:
            return ProfileNotFound()
        logger.info("Profile updated for user %s", user_id)
        return ProfileFound(profile=profile)

    async def change_password(
        self,
        user_id: str,
        current_password: str,
        new_password: str,
    ) -> PasswordChange:
        """Verify current_password, enforce the strength policy, store the new hash."""
        missing = missing_requirements(new_password)
        too_long = exceeds_max_bytes(new_password)
        if missing or too_long:
            return WeakPassword(missing=missing, too_long=too_long)
        try:
            current_hash = await self._profile_repo.get_password_hash(user_id)
            if current_hash is None:
                return ProfileNotFound()
            matches = await asyncio.to_thread(
                self._password_hasher.verify_password, current_password, current_hash
            )
            if not matches:
                logger.info("Password change rejected for user %s: wrong current password", user_id)
                return InvalidCurrentPassword()
            new_hash = await asyncio.to_thread(
                self._password_hasher.hash_password, new_password
            )
            if not await self._profile_repo.set_password_hash(user_id, new_hash):
                return ProfileNotFound()
            profile = await self._profile_repo.get_profile(user_id)
        except _PERSISTENCE_ERRORS as e:
            logger.error("Password change failed for user %s: %s", user_id, e)
            return OperationFailed(detail=str(e))
        if profile is None:
            return ProfileNotFound()
        logger.info("Password changed for user %s", user_id)
        return ProfileFound(profile=profile)
