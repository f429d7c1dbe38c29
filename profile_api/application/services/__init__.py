"""Application services."""

from profile_api.application.services.profile_service import ProfileService

__all__ = ["ProfileService"]
