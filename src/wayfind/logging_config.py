"""Structured logging for the command-line entry points.

The library itself only calls ``structlog.get_logger()``; configuring the
pipeline is left to whichever process embeds it. ``wayfind-sync`` calls
:func:`setup_logging` once at startup.
"""

import logging
import sys

import structlog

from wayfind.config import Settings

# Third-party loggers that log every request or statement at INFO.
_CHATTY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite")


def setup_logging(settings: Settings) -> None:
    """Send structlog events to stderr as JSON or console lines.

    Stdout stays free for the runner's own status output.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if settings.log_format == "json" else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(level=level, stream=sys.stderr, format="%(message)s")
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
