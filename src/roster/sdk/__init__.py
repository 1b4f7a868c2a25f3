from __future__ import annotations

from .client import RosterClient, RosterClientError

__all__ = ["RosterClient", "RosterClientError"]
