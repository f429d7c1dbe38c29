"""Profile repository: parameterized single-row queries against the users table.

users.id is a Postgres uuid. A principal id that is not a UUID cannot match
any row, so it is answered as "no row" without issuing a query. Only the
profile columns are selected; password_hash is read solely by
get_password_hash. SQLAlchemy errors propagate to the caller.
"""

import uuid
from typing import Any

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.application.dtos.profile import UserProfile
from profile_api.domain.exceptions import DuplicateEmailException
from profile_api.infrastructure.persistence.models.user import User

PROFILE_COLUMNS = (
    User.id,
    User.username,
    User.email,
    User.first_name,
    User.last_name,
    User.role,
    User.is_active,
    User.created_at,
    User.updated_at,
)


def _row_to_profile(row: Any) -> UserProfile:
    """Map a projected users row to UserProfile."""
    return UserProfile(
        id=str(row.id),
        username=row.username,
        email=row.email,
        first_name=row.first_name,
        last_name=row.last_name,
        role=row.role,
        is_active=row.is_active,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _as_user_id(user_id: str) -> str | None:
    """Canonical UUID text for user_id, or None if it is not a UUID."""
    try:
        return str(uuid.UUID(user_id))
    except ValueError:
        return None


class ProfileRepository:
    """Reads and updates the caller's own users row."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_profile(self, user_id: str) -> UserProfile | None:
        row_id = _as_user_id(user_id)
        if row_id is None:
            return None
        result = await self.db.execute(
            select(*PROFILE_COLUMNS).where(User.id == row_id)
        )
        row = result.one_or_none()
        return _row_to_profile(row) if row is not None else None

    async def email_taken_by_other(self, email: str, user_id: str) -> bool:
        row_id = _as_user_id(user_id)
        if row_id is None:
            # No row to update, so the update itself reports not found.
            return False
        result = await self.db.execute(
            select(User.id).where(User.email == email, User.id != row_id).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def update_profile(
        self,
        user_id: str,
        first_name: str,
        last_name: str,
        email: str,
    ) -> UserProfile | None:
        """Update name/email and stamp updated_at; raise DuplicateEmailException on unique violation."""
        row_id = _as_user_id(user_id)
        if row_id is None:
            return None
        stmt = (
            update(User)
            .where(User.id == row_id)
            .values(
                first_name=first_name,
                last_name=last_name,
                email=email,
                updated_at=func.now(),
            )
            .returning(*PROFILE_COLUMNS)
        )
        # Savepoint so a unique violation leaves the outer transaction usable.
        try:
            async with self.db.begin_nested():
                result = await self.db.execute(stmt)
        except IntegrityError as e:
            raise DuplicateEmailException(email) from e
        row = result.one_or_none()
        return _row_to_profile(row) if row is not None else None

    async def get_password_hash(self, user_id: str) -> str | None:
        row_id = _as_user_id(user_id)
        if row_id is None:
            return None
        result = await self.db.execute(
            select(User.password_hash).where(User.id == row_id)
        )
        return result.scalar_one_or_none()

    async def set_password_hash(self, user_id: str, password_hash: str) -> bool:
        row_id = _as_user_id(user_id)
        if row_id is None:
            return False
        result = await self.db.execute(
            update(User)
            .where(User.id == row_id)
            .values(password_hash=password_hash, updated_at=func.now())
        )
        return bool(result.rowcount)
