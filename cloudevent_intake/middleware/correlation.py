# cloudevent_intake/middleware/correlation.py
import contextvars
import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ..config import settings

log = logging.getLogger("cloudevent_intake.http")

request_id_var = contextvars.ContextVar("request_id", default=None)
correlation_id_var = contextvars.ContextVar("correlation_id", default=None)


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        record.correlation_id = correlation_id_var.get()
        return True


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Assign request/correlation ids, echo them on the response and log
    REQ/RES/ERR lines around every call.

    A binary-mode `ce-id` is used as the correlation id when the caller
    did not send one, so logs can be joined to the event.
    """

    async def dispatch(self, request: Request, call_next):
        req_id = request.headers.get(settings.REQUEST_ID_HEADER) or str(uuid.uuid4())
        corr_id = (
            request.headers.get(settings.CORRELATION_ID_HEADER)
            or request.headers.get("ce-id")
            or req_id
        )
        request_id_var.set(req_id)
        correlation_id_var.set(corr_id)
        request.state.request_id = req_id

        start = time.time()
        log.info(
            "REQ method=%s path=%s content_type=%s client=%s",
            request.method,
            request.url.path,
            request.headers.get("content-type"),
            request.client.host if request.client else None,
        )
        try:
            response: Response = await call_next(request)
        except Exception:
            dur_ms = int((time.time() - start) * 1000)
            log.exception("ERR dur_ms=%s path=%s", dur_ms, request.url.path)
            raise

        dur_ms = int((time.time() - start) * 1000)
        log.info("RES status=%s dur_ms=%s path=%s", response.status_code, dur_ms, request.url.path)
        response.headers[settings.REQUEST_ID_HEADER] = req_id
        response.headers[settings.CORRELATION_ID_HEADER] = corr_id
        return response
