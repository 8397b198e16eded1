"""
Centralized logging configuration using structlog

Application events and stdlib records (uvicorn, httpx) go through the
same processor chain, so a service emits one consistent stream.
"""

import sys
import logging
from typing import Optional
import structlog
from structlog.processors import JSONRenderer

from ..config.settings import settings

# stdlib loggers that should render like our own events
_FOREIGN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "httpx")


def _shared_processors() -> list:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    service_name: Optional[str] = None
) -> None:
    """
    Configure logging for the application

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log format ('json' or 'text'); debug mode forces 'text'
        service_name: Name of the service, bound to every event
    """
    level = log_level or settings.log_level
    format_type = "text" if settings.debug else (log_format or settings.log_format)
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    renderer = JSONRenderer() if format_type == "json" else structlog.dev.ConsoleRenderer()
    shared_processors = _shared_processors()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(numeric_level)

    for name in _FOREIGN_LOGGERS:
        foreign = logging.getLogger(name)
        foreign.handlers = []
        foreign.propagate = True

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    if service_name:
        structlog.contextvars.bind_contextvars(service=service_name)


def get_logger(name: str, **initial_context) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance with optional initial context

    Example:
        logger = get_logger(__name__, component="store")
        logger.info("series_replaced", series_id="433", observations=60)
    """
    logger = structlog.get_logger(name)

    if initial_context:
        logger = logger.bind(**initial_context)

    return logger


class LoggerMixin:
    """
    Mixin to add logging capabilities to a class

    Example:
        class SGSCollector(LoggerMixin):
            def __init__(self):
                self.logger = self.get_logger()
    """

    @classmethod
    def get_logger(cls, **context):
        """Get logger for this class"""
        return get_logger(cls.__name__, **context)
