from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_URL = "https://randomuser.me/api/?results=5"


class BootstrapError(RuntimeError):
    pass


def fetch_sample_users(
    url: str = DEFAULT_SAMPLE_URL,
    *,
    timeout_s: float = 10.0,
    transport: httpx.BaseTransport | None = None,
) -> str:
    """Fetch sample user data once at startup and log it.

    The fetched data is only reported; it is never loaded into a registry.
    """

    try:
        with httpx.Client(timeout=timeout_s, transport=transport) as client:
            res = client.get(url, headers={"Accept": "application/json"})
    except httpx.HTTPError as ex:
        raise BootstrapError(f"sample fetch failed: {ex}") from ex

    if res.status_code >= 400:
        raise BootstrapError(f"sample fetch failed: {res.status_code} {res.text}")

    body = res.text
    logger.info("Fetched JSON from API:\n%s", body)
    return body
