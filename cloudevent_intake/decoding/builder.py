# cloudevent_intake/decoding/builder.py
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..errors import CloudEventDecodeError, InvalidCloudEventError
from ..models.cloud_event import CloudEvent

log = logging.getLogger("cloudevent_intake.decoding")

T = TypeVar("T")

# Converts the raw JSON `data` value into the caller's payload type.
Projection = Callable[[Any], T]

BINARY_MODE = "binary-mode message"
STRUCTURED_MODE = "structured-mode message"


def identity(raw: Any) -> Any:
    return raw


def projection_for(type_: Any) -> Projection:
    """
    Build a projection from anything pydantic can validate: a BaseModel
    subclass, a TypedDict, `list[int]`, ...
    """
    adapter = TypeAdapter(type_)
    return adapter.validate_python


def decode_failure(mode: str, exc: BaseException) -> CloudEventDecodeError:
    """Wrap any decode-time error into the uniform 400 failure for `mode`."""
    log.debug("decode failed mode=%s cause=%s: %s", mode, type(exc).__name__, exc)
    return CloudEventDecodeError(mode, cause=exc)


def build_cloud_event(
    attributes: Dict[str, Any],
    mode: str,
    project: Optional[Projection] = None,
) -> CloudEvent:
    """
    Validate a raw attribute map and construct the event.

    Nothing but CloudEventDecodeError leaves this function; the original
    error is chained for diagnostics.
    """
    project = project or identity
    try:
        payload = dict(attributes)
        raw = payload.pop("data", None)
        try:
            payload["data"] = project(raw) if raw is not None else None
        except Exception as e:
            raise InvalidCloudEventError(f"Could not project event data: {e}") from e
        try:
            return CloudEvent.model_validate(payload)
        except ValidationError as e:
            raise InvalidCloudEventError(str(e)) from e
    except Exception as e:
        raise decode_failure(mode, e) from e
