"""Application DTOs (read-models and operation outcomes)."""

from profile_api.application.dtos.profile import (
    EmailAlreadyInUse,
    InvalidCurrentPassword,
    OperationFailed,
    PasswordChange,
    ProfileFound,
    ProfileLookup,
    ProfileNotFound,
    ProfileUpdate,
    UserProfile,
    WeakPassword,
)

__all__ = [
    "EmailAlreadyInUse",
    "InvalidCurrentPassword",
    "OperationFailed",
    "PasswordChange",
    "ProfileFound",
    "ProfileLookup",
    "ProfileNotFound",
    "ProfileUpdate",
    "UserProfile",
    "WeakPassword",
]
