from __future__ import annotations

from fastapi import FastAPI

from ..api import create_api_app
from ..core.registry import UserRegistry


def create_app(registry: UserRegistry | None = None) -> FastAPI:
    """Create the full app around `registry` (a fresh one if not given)."""

    if registry is None:
        registry = UserRegistry()
    return create_api_app(registry)
