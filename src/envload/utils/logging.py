"""
Library-side structured logging using structlog.

Events are rendered into stdlib ``logging`` records under the ``envload``
logger hierarchy, so the host application's logging configuration decides
whether and where they appear. Structured key-value pairs become attributes
of the LogRecord (``record.field``, ``record.variable``, ...).
"""

import logging
from typing import Any

import structlog

ROOT_LOGGER_NAME = "envload"

_PROCESSORS: list[structlog.types.Processor] = [
    structlog.stdlib.filter_by_level,
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
    structlog.stdlib.render_to_log_kwargs,
]


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance.

    Independent of any global ``structlog.configure`` call made by the
    application.

    Args:
        name: Logger name (typically __name__ of the module).

    Returns:
        structlog logger writing to ``logging.getLogger(name)``.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or ROOT_LOGGER_NAME),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def log_context(**kwargs: Any) -> structlog.contextvars.bound_contextvars:
    """
    Context manager for adding context to all logs within the block.

    Example:
        with log_context(record="AppSettings"):
            log.debug("Resolved field")  # Will include record

    Args:
        **kwargs: Key-value pairs to add to log context.

    Returns:
        Context manager that binds the values.
    """
    return structlog.contextvars.bound_contextvars(**kwargs)
