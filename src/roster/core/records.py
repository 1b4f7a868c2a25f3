from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A stored user record.

    The identifier is not part of the record: it is the key the registry stores it under.
    """

    name: str
