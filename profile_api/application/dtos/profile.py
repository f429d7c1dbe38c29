"""DTOs for profile use cases (no dependency on ORM).

Service methods return one of the outcome dataclasses below instead of
raising, so the presentation layer can map every case to a status code.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserProfile:
    """Profile read-model: the projected users row. No password hash."""

    id: str
    username: str
    email: str
    first_name: str
    last_name: str
    role: str
    is_active: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ProfileFound:
    """The operation succeeded; profile is the caller's current row."""

    profile: UserProfile


@dataclass(frozen=True)
class ProfileNotFound:
    """No users row matches the principal identifier."""


@dataclass(frozen=True)
class EmailAlreadyInUse:
    """Another user already holds the requested email."""


@dataclass(frozen=True)
class WeakPassword:
    """New password failed the strength policy.

    missing lists the unmet requirements; too_long is set when the password
    exceeds the bcrypt byte limit.
    """

    missing: tuple[str, ...]
    too_long: bool = False


@dataclass(frozen=True)
class InvalidCurrentPassword:
    """Supplied current password does not match the stored hash."""


@dataclass(frozen=True)
class OperationFailed:
    """Query or connection failure. detail is diagnostic text, not for end users."""

    detail: str


ProfileLookup = ProfileFound | ProfileNotFound | OperationFailed
ProfileUpdate = ProfileFound | ProfileNotFound | EmailAlreadyInUse | OperationFailed
PasswordChange = (
    ProfileFound
    | ProfileNotFound
    | WeakPassword
    | InvalidCurrentPassword
    | OperationFailed
)
