"""Logging configuration using structlog.

fixtureworks logs at debug level only (builds, sequence store lifecycle),
so the default WARNING level keeps test output quiet. Set
FIXTUREWORKS_LOG_LEVEL=DEBUG to trace which factories a test builds.
"""

import logging
import sys

import structlog

from fixtureworks.config.settings import get_settings


def configure_logging(level: str | None = None, debug: bool | None = None) -> None:
    """Configure structlog for fixtureworks.

    Args:
        level: Log level name; defaults to the `log_level` setting.
        debug: Pretty console output instead of JSON; defaults to the `debug` setting.
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    pretty = settings.debug if debug is None else debug

    log_level = getattr(logging, level_name)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if pretty else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Standard logging for libraries the factories call into (ORMs, HTTP clients)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )
