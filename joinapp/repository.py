"""Storage for user entities."""

from __future__ import annotations

from joinapp.entity import User

SIMULATED_ID = "9420"


class UserRepository:
    """Provides database operations for users."""

    def create(self, user: User) -> None:
        """Persist the user, assigning the id the store hands back."""
        # The insert is simulated: the store always returns the same id.
        user.id = SIMULATED_ID