"""Routing of HTTP requests to user handlers, exposed as a WSGI app."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Protocol

from joinapp.handler import JsonResponse

logger = logging.getLogger(__name__)

Endpoint = Callable[[Mapping[str, str]], JsonResponse]


class UserRegistrar(Protocol):
    """Anything that can register a user by name."""

    def register_user(self, username: str) -> JsonResponse:
        """Register ``username`` and return the response."""
        ...


@dataclass(frozen=True)
class _Route:
    method: str
    segments: tuple[str, ...]
    endpoint: Endpoint

    def match(self, method: str, segments: list[str]) -> dict[str, str] | None:
        if method != self.method or len(segments) != len(self.segments):
            return None
        params: dict[str, str] = {}
        for expected, actual in zip(self.segments, segments):
            if expected.startswith(":"):
                if not actual:
                    return None
                params[expected[1:]] = actual
            elif expected != actual:
                return None
        return params


def _status_response(status: HTTPStatus) -> JsonResponse:
    return JsonResponse(status, {"code": int(status), "message": status.phrase})


class Router:
    """Maps method and path patterns such as ``/join/:username`` to endpoints."""

    def __init__(self) -> None:
        self._routes: list[_Route] = []

    def get(self, pattern: str, endpoint: Endpoint) -> None:
        """Register ``endpoint`` for GET requests matching ``pattern``."""
        self._routes.append(_Route("GET", tuple(pattern.split("/")), endpoint))

    def dispatch(self, method: str, path: str) -> JsonResponse:
        """Run the endpoint matching the request and return its response."""
        segments = path.split("/")
        for route in self._routes:
            params = route.match(method, segments)
            if params is None:
                continue
            try:
                response = route.endpoint(params)
            except Exception:
                logger.exception("panic recovered while serving %s %s", method, path)
                response = _status_response(HTTPStatus.INTERNAL_SERVER_ERROR)
            break
        else:
            response = _status_response(HTTPStatus.NOT_FOUND)
        logger.info("%s %s -> %d", method, path, response.status)
        return response

    def __call__(
        self, environ: Mapping[str, Any], start_response: Callable[..., Any]
    ) -> Iterable[bytes]:
        """Serve a request as a WSGI application."""
        method = environ.get("REQUEST_METHOD", "GET")
        raw_path = environ.get("PATH_INFO", "") or "/"
        path = raw_path.encode("latin-1").decode("utf-8", "replace")
        response = self.dispatch(method, path)
        body = response.body()
        status = HTTPStatus(response.status)
        start_response(
            f"{status.value} {status.phrase}",
            [
                ("Content-Type", "application/json; charset=utf-8"),
                ("Content-Length", str(len(body))),
            ],
        )
        return [body]


def setup_routes(user_handler: UserRegistrar) -> Router:
    """Build the router serving ``GET /join/:username``."""
    router = Router()
    router.get("/join/:username", lambda params: user_handler.register_user(params["username"]))
    return router