from __future__ import annotations

from .users import encode_json, user_to_created_item, user_to_item

__all__ = [
    "encode_json",
    "user_to_created_item",
    "user_to_item",
]
