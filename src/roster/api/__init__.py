from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from ..core.registry import UserRegistry
from .errors import ApiError
from .routes import mount_users_api


def create_api_app(registry: UserRegistry) -> FastAPI:
    """Build the HTTP API around an explicitly owned registry."""

    app = FastAPI(title="roster", version="0.1.0")
    app.state.registry = registry

    @app.exception_handler(ApiError)
    async def _api_error(request: Request, exc: ApiError) -> PlainTextResponse:  # noqa: ARG001
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    mount_users_api(app, registry)

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return "Hello World"

    @app.get("/healthz")
    def healthz() -> dict:
        return {"ok": True, "users": registry.count()}

    return app


__all__ = ["create_api_app"]
