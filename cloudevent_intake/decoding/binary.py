# cloudevent_intake/decoding/binary.py
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..errors import MalformedBodyError
from ..models.cloud_event import CloudEvent
from .body import decode_json
from .builder import BINARY_MODE, Projection, build_cloud_event, decode_failure
from .media_type import json_media_type

CE_HEADER_PREFIX = "ce-"


def binary_attributes(headers: Mapping[str, str]) -> Dict[str, Any]:
    """
    Collect `ce-*` headers as unprefixed attribute names.

    The prefix test is case-sensitive on the names exactly as the HTTP
    layer supplies them (ASGI servers hand them over lower-cased).
    """
    return {
        name[len(CE_HEADER_PREFIX):]: value
        for name, value in headers.items()
        if name.startswith(CE_HEADER_PREFIX)
    }


def decode_binary(
    headers: Mapping[str, str],
    body: bytes,
    project: Optional[Projection] = None,
) -> CloudEvent:
    media_type = json_media_type(headers)

    attributes = binary_attributes(headers)
    # The body's actual content type wins over a ce-datacontenttype header
    attributes["datacontenttype"] = str(media_type)
    try:
        attributes["data"] = decode_json(body)
    except MalformedBodyError as e:
        raise decode_failure(BINARY_MODE, e) from e

    return build_cloud_event(attributes, BINARY_MODE, project)
