"""SQLAlchemy ORM models."""

from profile_api.infrastructure.persistence.models.user import User

__all__ = ["User"]
