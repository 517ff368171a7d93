# cloudevent_intake/targets/cloud_event_target.py
from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Generic, Optional, TypeVar

from fastapi import APIRouter, Request
from starlette.responses import Response

from ..decoding import Projection, event_from_request, projection_for
from .context import RequestContext

log = logging.getLogger("cloudevent_intake.targets")

T = TypeVar("T")


class CloudEventTarget(Generic[T]):
    """
    Wraps a user function so it can be served over HTTP.

    `function(event)` or, with `with_context=True`, `function(event, context)`.
    The function may be sync or async; its return value is ignored and the
    caller receives an empty 200. Pass `data_type` (anything pydantic can
    validate) or an explicit `project` callable to type `event.data`.
    """

    def __init__(
        self,
        function: Callable[..., Any],
        *,
        data_type: Any = None,
        project: Optional[Projection] = None,
        with_context: bool = False,
        name: Optional[str] = None,
    ):
        if data_type is not None and project is not None:
            raise ValueError("Pass either data_type or project, not both")
        self.function = function
        self.project: Optional[Projection] = project or (projection_for(data_type) if data_type is not None else None)
        self.with_context = with_context
        self.name = name or getattr(function, "__name__", "function")

    async def handle(self, request: Request) -> Response:
        event = await event_from_request(request, self.project)
        log.info("decoded event target=%s id=%s type=%s source=%s", self.name, event.id, event.type, event.source)

        context = RequestContext(request) if self.with_context else None
        result = self.function(event, context) if self.with_context else self.function(event)
        if inspect.isawaitable(result):
            await result

        headers = context.response_headers if context else None
        return Response(status_code=200, content=b"", headers=headers)


def build_router(target: CloudEventTarget, path: str = "/") -> APIRouter:
    """Mount a target as a POST route."""
    router = APIRouter(tags=["cloudevents"])

    async def invoke(request: Request) -> Response:
        return await target.handle(request)

    router.add_api_route(path, invoke, methods=["POST"], name=target.name)
    return router
