from __future__ import annotations

from .core import User, UserRegistry
from .runtime import RosterServer, create_app, run, serve
from .sdk import RosterClient, RosterClientError

__all__ = [
    "run",
    "serve",
    "create_app",
    "RosterServer",
    "RosterClient",
    "RosterClientError",
    "User",
    "UserRegistry",
]
