"""Business logic for user operations."""

from __future__ import annotations

from typing import Protocol

from joinapp.entity import User


class UserStore(Protocol):
    """Anything that can persist a user."""

    def create(self, user: User) -> None:
        """Persist the user, filling in its id."""
        ...


class UserUseCase:
    """Creates users through a store."""

    def __init__(self, user_repo: UserStore) -> None:
        self._user_repo = user_repo

    def create_user(self, username: str) -> User:
        """Create and persist a user named ``username``."""
        user = User(name=username, id="")
        self._user_repo.create(user)
        return user