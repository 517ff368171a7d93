# cloudevent_intake/errors.py
from __future__ import annotations

from typing import Optional


class BadRequestError(Exception):
    """
    A client error that the HTTP layer renders as-is.

    `message` is safe to show the caller. `cause` (also chained as __cause__
    when raised with `from`) is kept for logs only.
    """

    status_code: int = 400

    def __init__(self, message: str, *, status_code: int = 400, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class UnsupportedMediaTypeError(BadRequestError):
    """Content-Type is missing, unparseable, or not JSON."""


class MalformedBodyError(ValueError):
    """Body is not valid JSON, or not the JSON shape a decoder expects."""


class InvalidCloudEventError(ValueError):
    """Attributes failed validation or `data` could not be projected."""


class CloudEventDecodeError(BadRequestError):
    """The single externally visible shape for a malformed CloudEvent."""

    def __init__(self, mode: str, *, cause: Optional[BaseException] = None):
        super().__init__(f"Could not decode the request as a {mode}.", cause=cause)
        self.mode = mode
