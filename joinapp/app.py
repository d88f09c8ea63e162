"""Application wiring and the command that serves it."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from wsgiref import simple_server

from joinapp.handler import UserHandler
from joinapp.repository import UserRepository
from joinapp.router import Router, setup_routes
from joinapp.usecase import UserUseCase

DEFAULT_ADDRESS = "localhost:9420"

logger = logging.getLogger(__name__)


def parse_address(address: str) -> tuple[str, int]:
    """Split ``host:port`` into its parts; the host may be empty."""
    host, sep, port_text = address.rpartition(":")
    if not sep or not port_text.isdigit():
        raise ValueError(f"invalid address: {address!r}")
    port = int(port_text)
    if port > 65535:
        raise ValueError(f"invalid port in address: {address!r}")
    return host.strip("[]"), port


class App:
    """The HTTP application around a router."""

    def __init__(self, router: Router) -> None:
        self.router = router

    def run(self, address: str) -> None:
        """Serve the router on ``address`` until interrupted."""
        host, port = parse_address(address)
        with simple_server.make_server(host, port, self.router) as server:
            logger.info("listening and serving HTTP on %s", address)
            server.serve_forever()


def init_app() -> App:
    """Wire repository, use case, handler and router into an App."""
    user_repo = UserRepository()
    user_uc = UserUseCase(user_repo)
    user_handler = UserHandler(user_uc)
    return App(setup_routes(user_handler))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the server; return the process exit status."""
    parser = argparse.ArgumentParser(prog="joinapp", description="Serve the join API.")
    parser.add_argument("--address", default=DEFAULT_ADDRESS, help="host:port to listen on")
    args = parser.parse_args(argv)
    try:
        parse_address(args.address)
    except ValueError as err:
        parser.error(str(err))

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    app = init_app()
    try:
        app.run(args.address)
    except KeyboardInterrupt:
        pass
    except OSError as err:
        logger.error("server err: %s", err)
        return 1
    logger.info("[INFO] shutdown server gracefully")
    return 0