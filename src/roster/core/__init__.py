from __future__ import annotations

from .locks import ReadWriteLock
from .records import User
from .registry import UserRegistry

__all__ = [
    "ReadWriteLock",
    "User",
    "UserRegistry",
]
