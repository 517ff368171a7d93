# cloudevent_intake/models/cloud_event.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

DataT = TypeVar("DataT")

# --- CloudEvents v1.0 context attributes ---------------------------------------

REQUIRED_ATTRIBUTES = ("id", "source", "specversion", "type")


class CloudEvent(BaseModel, Generic[DataT]):
    """
    Canonical, immutable CloudEvent.

    Both transport encodings end up here, so a consumer cannot tell a
    binary-mode event from a structured-mode one. Unknown attributes are
    extension attributes and are kept as extra fields.
    """
    model_config = ConfigDict(frozen=True, extra="allow")

    # Required (must be non-empty strings; no coercion from numbers etc.)
    id: str = Field(min_length=1, strict=True)
    source: str = Field(min_length=1, strict=True)              # URI-reference, e.g. "/orders" or "https://..."
    specversion: str = Field(min_length=1, strict=True)
    type: str = Field(min_length=1, strict=True)                # e.g. "com.example.order.created"

    # Optional
    datacontenttype: Optional[str] = None
    dataschema: Optional[str] = None
    subject: Optional[str] = None
    time: Optional[datetime] = None

    # Payload, already projected by the caller
    data: Optional[DataT] = None

    @field_validator("time", mode="before")
    @classmethod
    def _time_is_rfc3339_string(cls, v: Any) -> Any:
        # No epoch numbers; a timestamp arrives as a string or an already-parsed datetime
        if v is None or isinstance(v, datetime):
            return v
        if isinstance(v, str) and not v.strip().lstrip("+-").replace(".", "", 1).isdigit():
            return v
        raise ValueError("time must be an RFC 3339 timestamp string")

    @property
    def extensions(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})
