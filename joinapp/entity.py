"""User entity and its validation rules."""

from __future__ import annotations

from dataclasses import dataclass


class MissingUsernameError(ValueError):
    """Raised when a user has an empty or blank name."""

    def __init__(self, message: str = "username cannot be empty") -> None:
        super().__init__(message)


@dataclass
class User:
    """A registered user."""

    name: str
    id: str = ""

    def validate(self) -> None:
        """Raise MissingUsernameError if the name is blank."""
        if not self.name.strip():
            raise MissingUsernameError()

    def to_dict(self) -> dict[str, str]:
        """Return the JSON representation of the user."""
        return {"id": self.id, "name": self.name}