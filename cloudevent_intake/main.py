# cloudevent_intake/main.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .errors import BadRequestError
from .logging_conf import setup_logging
from .middleware.correlation import CorrelationIdMiddleware
from .models.cloud_event import CloudEvent
from .routers.health_routes import router as health_router
from .targets import CloudEventTarget, RequestContext, build_router

setup_logging()
log = logging.getLogger("cloudevent_intake")


async def bad_request_handler(request: Request, exc: BadRequestError) -> JSONResponse:
    # The cause goes to the logs only, never into the response body
    log.warning(
        "bad request path=%s status=%s message=%s",
        request.url.path,
        exc.status_code,
        exc.message,
        exc_info=(type(exc.cause), exc.cause, exc.cause.__traceback__) if exc.cause else None,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app(target: CloudEventTarget, *, path: Optional[str] = None) -> FastAPI:
    """Build the HTTP app serving one CloudEvent function."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info(
            "startup service=%s env=%s target=%s path=%s",
            settings.SERVICE_NAME,
            settings.ENV,
            target.name,
            path or settings.TARGET_PATH,
        )
        yield
        log.info("shutdown complete")

    app = FastAPI(
        title=settings.SERVICE_NAME,
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CorrelationIdMiddleware)

    app.add_exception_handler(BadRequestError, bad_request_handler)

    app.include_router(health_router)
    app.include_router(build_router(target, path or settings.TARGET_PATH))
    return app


def log_event(event: CloudEvent, context: RequestContext) -> None:
    """Default function: log what arrived and echo the event id."""
    context.logger.info(
        "received event id=%s type=%s source=%s subject=%s datacontenttype=%s",
        event.id,
        event.type,
        event.source,
        event.subject,
        event.datacontenttype,
    )
    context.response_headers["ce-id"] = event.id


app = create_app(CloudEventTarget(log_event, with_context=True))

if __name__ == "__main__":
    uvicorn.run(
        "cloudevent_intake.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.ENV == "local",
    )
