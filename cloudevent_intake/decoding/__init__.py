from .binary import decode_binary
from .builder import (
    BINARY_MODE,
    STRUCTURED_MODE,
    Projection,
    build_cloud_event,
    projection_for,
)
from .media_type import MediaType, is_json, must_be_json, parse_media_type
from .selector import REQUIRED_BINARY_HEADERS, decode_event, event_from_request, is_binary_mode
from .structured import decode_structured

__all__ = [
    "BINARY_MODE",
    "STRUCTURED_MODE",
    "REQUIRED_BINARY_HEADERS",
    "MediaType",
    "Projection",
    "build_cloud_event",
    "decode_binary",
    "decode_event",
    "decode_structured",
    "event_from_request",
    "is_binary_mode",
    "is_json",
    "must_be_json",
    "parse_media_type",
    "projection_for",
]
