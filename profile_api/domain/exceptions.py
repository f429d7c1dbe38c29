"""Domain exceptions for the profile API.

These exceptions are independent of infrastructure concerns. The
presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class ProfileApiException(Exception):
    """Base exception for all profile API errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class AuthenticationException(ProfileApiException):
    """Raised when a bearer token is invalid, expired, or missing required claims."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class DuplicateEmailException(ProfileApiException):
    """Raised when an update would give a user an email already held by another user."""

    def __init__(self, email: str | None = None) -> None:
        super().__init__(
            "Email address already in use by another account",
            "DUPLICATE_EMAIL",
            {"email": email} if email else {},
        )
