# cloudevent_intake/targets/context.py
from __future__ import annotations

import logging
from typing import Dict, Optional

from starlette.requests import Request

from ..middleware.correlation import correlation_id_var, request_id_var


class RequestContext:
    """
    Per-invocation context handed to functions registered with
    `with_context=True`. Headers put in `response_headers` are sent back
    on the 200 response.

    Records from `logger` carry the request id through the
    CorrelationIdFilter installed by setup_logging().
    """

    def __init__(self, request: Request, logger: Optional[logging.Logger] = None):
        self.request = request
        self.request_id: Optional[str] = request_id_var.get()
        self.correlation_id: Optional[str] = correlation_id_var.get()
        self.logger = logger or logging.getLogger("cloudevent_intake.function")
        self.response_headers: Dict[str, str] = {}
