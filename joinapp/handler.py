"""HTTP handlers for user operations."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Protocol

from joinapp.entity import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JsonResponse:
    """An HTTP status with a JSON payload."""

    status: int
    payload: Mapping[str, Any] = field(default_factory=dict)

    def body(self) -> bytes:
        """Return the payload encoded as JSON bytes."""
        return json.dumps(self.payload, sort_keys=True, separators=(",", ":")).encode("utf-8")


class UserCreator(Protocol):
    """Anything that can create a user by name."""

    def create_user(self, username: str) -> User:
        """Create a user named ``username``."""
        ...


class UserHandler:
    """Turns user registration requests into responses."""

    def __init__(self, user_uc: UserCreator) -> None:
        self._user_uc = user_uc

    def register_user(self, username: str) -> JsonResponse:
        """Register ``username`` and describe the outcome."""
        try:
            user = self._user_uc.create_user(username)
        except Exception as err:  # any failure becomes a 500
            logger.error("failed to create user: %s", err)
            status = HTTPStatus.INTERNAL_SERVER_ERROR
            return JsonResponse(status, {"code": int(status), "message": status.phrase})

        return JsonResponse(
            HTTPStatus.OK,
            {"code": 200, "message": f"{user.name}({user.id}): playing di"},
        )