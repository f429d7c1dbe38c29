"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from profile_api.application.dtos.profile import UserProfile


class IProfileRepository(Protocol):
    """Protocol for the users-table profile repository (DIP)."""

    async def get_profile(self, user_id: str) -> UserProfile | None:
        """Return the profile row for user_id, or None when no row matches."""

    async def email_taken_by_other(self, email: str, user_id: str) -> bool:
        """Return True if a user other than user_id holds email."""

    async def update_profile(
        self,
        user_id: str,
        first_name: str,
        last_name: str,
        email: str,
    ) -> UserProfile | None:
        """Update name and email; return the updated row or None if no row matched."""

    async def get_password_hash(self, user_id: str) -> str | None:
        """Return the stored password hash, or None when no row matches."""

    async def set_password_hash(self, user_id: str, password_hash: str) -> bool:
        """Replace the password hash; return False when no row matched."""
