from .cloud_event_target import CloudEventTarget, build_router
from .context import RequestContext

__all__ = ["CloudEventTarget", "RequestContext", "build_router"]
