from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from starlette.concurrency import run_in_threadpool
from starlette.responses import Response

from ...core.registry import UserRegistry
from ..errors import ApiError, NotFound
from ..parsing import parse_user_body, parse_user_id
from ..serializers import encode_json, user_to_created_item, user_to_item

logger = logging.getLogger(__name__)


def _json_response(payload: dict, *, status_code: int = 200) -> Response:
    return Response(content=encode_json(payload), status_code=status_code, media_type="application/json")


def mount_users_api(app: FastAPI, registry: UserRegistry) -> None:
    @app.post("/users", status_code=201)
    async def create_user(request: Request) -> Response:
        """Create a user from a JSON body `{"name": str}`.

        Response (201):
          - id: the newly issued identifier
          - name
        """

        raw = await request.body()
        try:
            user = parse_user_body(raw)
        except ApiError as ex:
            logger.info("rejected user payload: %s", ex.message)
            raise

        # Keep the lock contention on worker threads, off the event loop.
        user_id = await run_in_threadpool(registry.create, user)
        return _json_response(user_to_created_item(user_id, user), status_code=201)

    @app.get("/users/{user_id}")
    def get_user(user_id: str) -> Response:
        uid = parse_user_id(user_id)
        user = registry.get(uid)
        if user is None:
            raise NotFound("user not found")
        return _json_response(user_to_item(user))
