from cloudevent_intake.decoding import decode_event, event_from_request, projection_for
from cloudevent_intake.errors import BadRequestError, CloudEventDecodeError, UnsupportedMediaTypeError
from cloudevent_intake.models.cloud_event import CloudEvent
from cloudevent_intake.targets.cloud_event_target import CloudEventTarget
from cloudevent_intake.targets.context import RequestContext

__all__ = [
    "BadRequestError",
    "CloudEvent",
    "CloudEventDecodeError",
    "CloudEventTarget",
    "RequestContext",
    "UnsupportedMediaTypeError",
    "decode_event",
    "event_from_request",
    "projection_for",
]
