# cloudevent_intake/decoding/structured.py
from __future__ import annotations

from typing import Mapping, Optional

from ..errors import MalformedBodyError
from ..models.cloud_event import CloudEvent
from .body import decode_json
from .builder import STRUCTURED_MODE, Projection, build_cloud_event, decode_failure
from .media_type import json_media_type


def decode_structured(
    headers: Mapping[str, str],
    body: bytes,
    project: Optional[Projection] = None,
) -> CloudEvent:
    media_type = json_media_type(headers)

    try:
        envelope = decode_json(body)
        if not isinstance(envelope, dict):
            raise MalformedBodyError(
                f"Expected a JSON object as the event envelope, got {type(envelope).__name__}."
            )
    except MalformedBodyError as e:
        raise decode_failure(STRUCTURED_MODE, e) from e

    # Envelopes may leave datacontenttype implied by the transport;
    # never overwrite an explicit value.
    if "datacontenttype" not in envelope:
        envelope = {**envelope, "datacontenttype": str(media_type)}

    return build_cloud_event(envelope, STRUCTURED_MODE, project)
