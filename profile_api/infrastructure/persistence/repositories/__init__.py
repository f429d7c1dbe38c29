"""SQLAlchemy repository implementations."""

from profile_api.infrastructure.persistence.repositories.profile_repo import (
    PROFILE_COLUMNS,
    ProfileRepository,
)

__all__ = ["PROFILE_COLUMNS", "ProfileRepository"]
