# cloudevent_intake/logging_conf.py
from __future__ import annotations

import logging
import sys

from .config import settings
from .middleware.correlation import CorrelationIdFilter

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | rid=%(request_id)s | %(message)s"

_configured = False


def setup_logging() -> None:
    """Configure the root logger once; safe to call from every app factory."""
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    # On the handler so records propagated from any logger get the ids
    handler.addFilter(CorrelationIdFilter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str = "cloudevent_intake") -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["LOG_FORMAT", "get_logger", "setup_logging"]
