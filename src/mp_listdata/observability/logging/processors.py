"""Observability – get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from mp_listdata.observability.logging.protocol import Logger


def get_logger(name: str | None = None, **initial_values: Any) -> Logger:
    """Return a structlog logger named *name*, pre-bound with *initial_values*.

    Engine modules call this once at import time with ``__name__``; the
    returned proxy picks up whatever configuration is active when it first
    logs, so :class:`JsonLoggerFactory` may be configured later.
    """
    logger = structlog.get_logger(name)
    return logger.bind(**initial_values) if initial_values else logger


__all__ = ["get_logger"]
