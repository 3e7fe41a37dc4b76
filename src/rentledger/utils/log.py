"""Structured logging for rentledger.

Engine modules log through stdlib loggers under ``rentledger``, which stay
silent until an application calls :func:`configure_logging`.
"""

import logging
import sys
from typing import Literal

import structlog

logging.getLogger("rentledger").addHandler(logging.NullHandler())


def configure_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING",
    format: Literal["json", "console"] = "console",
) -> None:
    """Route engine diagnostics to stderr.

    Reports printed on stdout stay parseable.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        format: Output format (json or console).
    """
    logging.basicConfig(format="%(message)s", stream=sys.stderr)
    logging.getLogger("rentledger").setLevel(getattr(logging, level))

    if format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger wrapping the stdlib logger ``name``.

    Wrapping the stdlib logger directly keeps events off stdout even when
    structlog was never configured.
    """
    return structlog.wrap_logger(logging.getLogger(name))
