from __future__ import annotations

import httpx

from ..core.records import User


class RosterClientError(RuntimeError):
    def __init__(self, message: str, *, status_code: int, text: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.text = text


class RosterClient:
    """HTTP client for a running roster server.

    Contract:
    - POST /users          {"name": str} -> 201 {"id": int, "name": str}
    - GET  /users/{id}     -> 200 {"name": str} | 404
    - GET  /healthz        -> 200 {"ok": true, ...}
    """

    def __init__(self, base_url: str = "http://127.0.0.1:8080") -> None:
        self.base_url = base_url.rstrip("/")

    @staticmethod
    def _raise_for_status(res: httpx.Response, action: str) -> None:
        if res.status_code >= 400:
            raise RosterClientError(
                f"{action} failed: {res.status_code} {res.text.strip()}",
                status_code=res.status_code,
                text=res.text,
            )

    def create_user(self, name: str, *, timeout_s: float = 10.0) -> int:
        """Create a user and return the id the server assigned."""
        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.post("/users", json={"name": name})
            self._raise_for_status(res, "Create user")
            data = res.json()
            try:
                return int(data["id"])
            except (KeyError, TypeError, ValueError) as ex:
                raise RuntimeError(f"Create user returned invalid response: {data}") from ex

    def get_user(self, user_id: int, *, timeout_s: float = 10.0) -> User | None:
        """Fetch a user by id; `None` if the server has no such user."""
        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.get(f"/users/{int(user_id)}")
            if res.status_code == 404:
                return None
            self._raise_for_status(res, "Get user")
            data = res.json()
            return User(name=str(data.get("name", "")))

    def ping(self, *, timeout_s: float = 0.2) -> bool:
        """Best-effort probe to determine if the server is reachable."""
        try:
            with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
                r = client.get("/healthz")
                if r.status_code != 200:
                    return False
                return bool(r.json().get("ok"))
        except (httpx.HTTPError, ValueError):
            return False
