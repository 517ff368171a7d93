# cloudevent_intake/decoding/media_type.py
from __future__ import annotations

import re
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..errors import UnsupportedMediaTypeError

CONTENT_TYPE = "content-type"

# "; key=value" or "; key=\"quoted;value\"" (RFC 7231 quoted-string)
_PARAM_RE = re.compile(r'\s*;\s*(?:([^=\s;"]+)\s*=\s*("(?:[^"\\]|\\.)*"|[^;"]*))?')
_ESCAPE_RE = re.compile(r"\\(.)")
_TOKEN_RE = re.compile(r"^[!#$%&'*+.^_`|~0-9A-Za-z-]+$")


class MediaType(BaseModel):
    """A parsed Content-Type value: `type/subtype; key=value; ...`."""
    model_config = ConfigDict(frozen=True)

    type: str
    subtype: str
    parameters: Dict[str, str] = Field(default_factory=dict)

    @property
    def mime_type(self) -> str:
        return f"{self.type}/{self.subtype}"

    def __str__(self) -> str:
        params = "".join(f"; {k}={_quote(v)}" for k, v in self.parameters.items())
        return f"{self.mime_type}{params}"


def content_type_header(headers: Mapping[str, str]) -> Optional[str]:
    """
    Look up Content-Type regardless of how the HTTP layer cased the name.
    Starlette's Headers are already case-insensitive; plain dicts are not.
    """
    value = headers.get(CONTENT_TYPE)
    if value is not None:
        return value
    for name, v in headers.items():
        if name.lower() == CONTENT_TYPE:
            return v
    return None


def parse_media_type(value: Optional[str]) -> MediaType:
    if value is None or not value.strip():
        raise UnsupportedMediaTypeError("Content-Type header is required.")

    essence = value.split(";", 1)[0]
    type_, sep, subtype = essence.strip().partition("/")
    if not sep or not type_ or not subtype or " " in essence.strip():
        raise UnsupportedMediaTypeError(f'Could not parse the Content-Type header "{value}".')

    params: Dict[str, str] = {}
    rest, pos = value[len(essence):].rstrip(), 0
    while pos < len(rest):
        m = _PARAM_RE.match(rest, pos)
        if m is None or m.end() == pos:
            raise UnsupportedMediaTypeError(f'Could not parse the Content-Type header "{value}".')
        pos = m.end()
        key, val = m.group(1), m.group(2)
        if key is None:
            continue  # empty segment, e.g. "application/json;"
        if val.startswith('"'):
            val = _ESCAPE_RE.sub(r"\1", val[1:-1])
        params[key.lower()] = val.strip()

    return MediaType(type=type_.lower(), subtype=subtype.lower(), parameters=params)


def is_json(media_type: MediaType) -> bool:
    # application/json, application/cloudevents+json, application/vnd.foo+json ...
    return media_type.mime_type == "application/json" or media_type.subtype.endswith("+json")


def must_be_json(media_type: MediaType) -> None:
    if not is_json(media_type):
        raise UnsupportedMediaTypeError(
            f'Unsupported encoding "{media_type}". Only "application/json" and "+json" types are supported.'
        )


def json_media_type(headers: Mapping[str, str]) -> MediaType:
    """Parse the request's Content-Type and fail fast unless it is JSON."""
    media_type = parse_media_type(content_type_header(headers))
    must_be_json(media_type)
    return media_type


def _quote(value: str) -> str:
    if _TOKEN_RE.match(value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
