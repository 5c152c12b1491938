"""structlog setup for seqfind.

Library code only calls ``get_logger``; applications that want the output
call ``configure_logging`` once at startup.
"""

from __future__ import annotations

import logging
import sys

import structlog

from seqfind.config import debug_enabled


def configure_logging(debug: bool | None = None) -> None:
    """Configure structlog to render to stderr.

    Args:
        debug: Log at DEBUG when True, WARNING when False. None defers to
            the SEQFIND_DEBUG environment variable.
    """
    if debug is None:
        debug = debug_enabled()

    level = logging.DEBUG if debug else logging.WARNING

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    return structlog.get_logger(name)
