"""Pydantic request/response schemas for the API."""

from profile_api.schemas.envelope import ApiResponse, envelope_response
from profile_api.schemas.profile import (
    PasswordChangeRequest,
    ProfileResponse,
    ProfileUpdateRequest,
)

__all__ = [
    "ApiResponse",
    "PasswordChangeRequest",
    "ProfileResponse",
    "ProfileUpdateRequest",
    "envelope_response",
]
