from __future__ import annotations

from .locks import ReadWriteLock
from .records import User


class UserRegistry:
    """In-memory user store with monotonic identifier allocation.

    The id counter and the map are guarded together by one lock: allocation and
    insertion happen in the same exclusive section, reads take the shared side.
    Identifiers start at 1 and are never reused.
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._users: dict[int, User] = {}
        self._last_id = 0

    def create(self, user: str | User) -> int:
        """Store a user and return its newly issued id.

        Callers are expected to have validated the name already.
        """
        record = user if isinstance(user, User) else User(name=str(user))
        with self._lock.write_locked():
            self._last_id += 1
            user_id = self._last_id
            self._users[user_id] = record
            return user_id

    def get(self, user_id: int) -> User | None:
        with self._lock.read_locked():
            return self._users.get(int(user_id))

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._users)

    def last_id(self) -> int:
        with self._lock.read_locked():
            return self._last_id
