from __future__ import annotations

from .users import mount_users_api

__all__ = ["mount_users_api"]
