import logging
import sys
from typing import Any

import structlog

from .settings import settings

_HANDLER_NAME = "cqueue"


def _shared_processors() -> list[Any]:
    """Processors applied to both structlog and stdlib log records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        # Add caller information in development
        structlog.processors.CallsiteParameterAdder(
            parameters=(
                [structlog.processors.CallsiteParameter.FUNC_NAME]
                if settings.debug
                else []
            )
        ),
    ]


def setup_logging(log_level: str | None = None) -> None:
    """Configure structured logging with structlog.

    structlog loggers and stdlib loggers both end up on one stdout handler
    rendered by ``ProcessorFormatter``. Fields passed to stdlib loggers via
    ``extra=`` (``job_id``, ``worker_id`` ...) become keys of the event.
    """

    level = getattr(logging, log_level or settings.log_level)
    shared = _shared_processors()

    # JSON formatting for production, pretty printing for development
    if settings.debug:
        renderers = [structlog.dev.ConsoleRenderer()]
    else:
        renderers = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[*shared, structlog.stdlib.ExtraAdder()],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *renderers,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    # Replace our own handler only, so repeated app creation does not duplicate lines
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def add_request_context(request_id: str, **context: Any) -> None:
    """Add request-specific context to all log messages."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, **context)
