from __future__ import annotations

import contextlib
import logging
import socket
import threading
import time
from dataclasses import dataclass, field

import uvicorn

from ..core.registry import UserRegistry
from ..sdk.client import RosterClient
from .app import create_app

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RosterServer:
    host: str
    port: int
    url: str
    registry: UserRegistry
    _server: uvicorn.Server = field(repr=False, compare=False)
    _thread: threading.Thread = field(repr=False, compare=False)

    def client(self) -> RosterClient:
        return RosterClient(self.url.rstrip("/"))

    def stop(self, *, timeout_s: float = 5.0) -> None:
        self._server.should_exit = True
        self._thread.join(timeout=timeout_s)


def _find_free_port(host: str) -> int:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def run(
    *,
    host: str = "127.0.0.1",
    port: int = 0,
    registry: UserRegistry | None = None,
    log_level: str = "info",
    access_log: bool = False,
    startup_timeout_s: float = 5.0,
) -> RosterServer:
    """Start a roster server in a background thread and return a handle to it.

    Notes:
    - `port=0` means "pick a free port".
    - The registry is owned by the caller when passed in; otherwise a fresh one is created.
    """

    if registry is None:
        registry = UserRegistry()
    if port == 0:
        port = _find_free_port(host)

    app = create_app(registry)
    config = uvicorn.Config(app, host=host, port=port, log_level=log_level, access_log=access_log)
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.monotonic() + startup_timeout_s
    while not server.started:
        if not thread.is_alive():
            raise RuntimeError(f"roster server failed to start on {host}:{port}")
        if time.monotonic() > deadline:
            server.should_exit = True
            raise RuntimeError(f"roster server did not start within {startup_timeout_s}s")
        time.sleep(0.01)

    url = f"http://{host}:{port}/"
    logger.info("Server listening on %s", url)
    return RosterServer(host=host, port=port, url=url, registry=registry, _server=server, _thread=thread)


def serve(
    *,
    host: str = "127.0.0.1",
    port: int = 8080,
    registry: UserRegistry | None = None,
    log_level: str = "info",
    access_log: bool = False,
) -> None:
    """Run a roster server in the foreground until interrupted."""

    app = create_app(registry)
    logger.info("Server listening on http://%s:%d/", host, port)
    # uvicorn logs and exits the process if the port cannot be bound.
    uvicorn.run(app, host=host, port=port, log_level=log_level, access_log=access_log)
