"""Logging for the scheduler.

structlog sits on top of the standard library logging module. Each event is
one line on stdout, JSON by default or key=value console output for local
runs (``LOG_FORMAT=console``). The HTTP layer binds ``request_id`` through
structlog contextvars, so every line logged while serving a request carries it.
"""
import logging
import sys
import uuid

import structlog

RENDERERS = {
    "json": structlog.processors.JSONRenderer,
    "console": structlog.dev.ConsoleRenderer,
}


def setup_structured_logging(log_level: str = "INFO", log_format: str = "json"):
    """
    Configure structlog and the root stdlib logger.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        log_format: "json" or "console"
    """
    try:
        renderer = RENDERERS[log_format.lower()]()
    except KeyError:
        raise ValueError(f"Unknown log format {log_format!r}; expected one of {sorted(RENDERERS)}") from None

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, log_level.upper())
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Short id echoed in X-Request-ID and bound to every log line of a request."""
    return f"req-{uuid.uuid4().hex[:12]}"
