# cloudevent_intake/decoding/body.py
from __future__ import annotations

from typing import Any

import orjson

from ..errors import MalformedBodyError


def decode_json(body: bytes) -> Any:
    """Parse a UTF-8 JSON body. An empty body decodes to None."""
    if not body or not body.strip():
        return None
    try:
        return orjson.loads(body)
    except orjson.JSONDecodeError as e:
        raise MalformedBodyError(f"Could not parse the request body as JSON: {e}") from e
