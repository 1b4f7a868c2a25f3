from __future__ import annotations

import json
import logging
from typing import Any

from ...core.records import User
from ..errors import EncodingFailure

logger = logging.getLogger(__name__)


def user_to_created_item(user_id: int, user: User) -> dict[str, Any]:
    return {"id": int(user_id), "name": user.name}


def user_to_item(user: User) -> dict[str, Any]:
    return {"name": user.name}


def encode_json(payload: Any) -> bytes:
    """Render a response payload, raising `EncodingFailure` if it cannot be serialized."""
    try:
        return json.dumps(payload, ensure_ascii=False, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as ex:
        logger.error("could not encode response: %s", ex)
        raise EncodingFailure("could not encode response") from ex
