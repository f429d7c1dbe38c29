"""Domain layer: exceptions independent of web and persistence concerns."""

from profile_api.domain.exceptions import (
    AuthenticationException,
    DuplicateEmailException,
    ProfileApiException,
)

__all__ = [
    "AuthenticationException",
    "DuplicateEmailException",
    "ProfileApiException",
]
