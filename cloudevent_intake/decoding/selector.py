# cloudevent_intake/decoding/selector.py
from __future__ import annotations

from typing import Mapping, Optional

from starlette.requests import Request

from ..models.cloud_event import CloudEvent
from .binary import decode_binary
from .builder import Projection
from .structured import decode_structured

REQUIRED_BINARY_HEADERS = frozenset({"ce-type", "ce-specversion", "ce-source", "ce-id"})


def is_binary_mode(headers: Mapping[str, str]) -> bool:
    # All-or-nothing: three of four ce-* headers still means structured-mode.
    return all(name in headers for name in REQUIRED_BINARY_HEADERS)


def decode_event(
    headers: Mapping[str, str],
    body: bytes,
    project: Optional[Projection] = None,
) -> CloudEvent:
    """Decode one request (headers + raw body) in whichever mode it uses."""
    if is_binary_mode(headers):
        return decode_binary(headers, body, project)
    return decode_structured(headers, body, project)


async def event_from_request(request: Request, project: Optional[Projection] = None) -> CloudEvent:
    body = await request.body()
    return decode_event(request.headers, body, project)
