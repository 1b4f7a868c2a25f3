from __future__ import annotations

from .app import create_app
from .bootstrap import DEFAULT_SAMPLE_URL, BootstrapError, fetch_sample_users
from .server import RosterServer, run, serve

__all__ = [
    "create_app",
    "DEFAULT_SAMPLE_URL",
    "BootstrapError",
    "fetch_sample_users",
    "RosterServer",
    "run",
    "serve",
]
