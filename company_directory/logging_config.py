"""
Logging configuration for the company directory service.

Routes structlog through the standard library so that third-party
loggers (uvicorn, SQLAlchemy) share the same output.
"""

import logging
import sys
from typing import Any, Optional

import structlog


def setup_logging(
    log_level: str = "INFO",
    service_name: str = "company-directory-service",
    use_json: bool = True,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        service_name: Name of the service for log identification
        use_json: Render JSON lines instead of the console format
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.get_logger(service_name).debug("Logging configured", level=log_level)


def get_logger(name: Optional[str] = None, **context: Any) -> Any:
    """
    Get a structlog logger, optionally bound with component context.

    Args:
        name: Logger name (usually __name__)
        **context: Key/value pairs bound to every event

    Returns:
        Bound structlog logger
    """
    logger = structlog.get_logger(name or "company-directory-service")
    if context:
        logger = logger.bind(**context)
    return logger
