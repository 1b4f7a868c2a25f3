from __future__ import annotations

import json
import re
from typing import Any

from ...core.records import User
from ..errors import InvalidInput, ValidationError

# JSON escapes can decode to lone surrogates, which cannot be encoded as UTF-8.
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def parse_user_body(raw: bytes | str) -> User:
    """Decode a `POST /users` body into a `User`.

    Unknown fields are ignored and a missing `name` reads as empty, which then
    fails validation rather than decoding.
    """

    try:
        body: Any = json.loads(raw)
    except (UnicodeDecodeError, ValueError) as ex:
        raise InvalidInput(f"invalid JSON: {ex}") from ex

    if body is None:
        body = {}
    if not isinstance(body, dict):
        raise InvalidInput(f"invalid JSON: expected an object, got {type(body).__name__}")

    name = body.get("name")
    if name is None:
        name = ""
    if not isinstance(name, str):
        raise InvalidInput("invalid JSON: name must be a string")
    if not name:
        raise ValidationError("Name is required")

    return User(name=_LONE_SURROGATE.sub("\ufffd", name))


def parse_user_id(value: Any) -> int:
    s = str(value)
    # str.isdigit() accepts non-ASCII digits that int() may reject.
    if not s or not s.isascii() or not s.isdigit():
        raise InvalidInput("invalid user id")
    try:
        return int(s)
    except ValueError as ex:
        # Longer than the interpreter's int conversion limit.
        raise InvalidInput("invalid user id") from ex


__all__ = ["parse_user_body", "parse_user_id"]
