"""structlog setup for applications embedding fieldrules.

Library events go through structlog into the stdlib ``fieldrules`` logger,
which carries only a NullHandler until ``configure_logging()`` is called.
An application that never configures logging sees no output.
"""

import logging
import sys
from typing import Optional

import structlog

from fieldrules.config import Settings, get_settings

LIBRARY_LOGGER = "fieldrules"

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


class RenderedLineHandler(logging.StreamHandler):
    """Writes lines already rendered by structlog, one per event."""


def get_logger(name: str = LIBRARY_LOGGER):
    """structlog logger bound to a stdlib logger under ``fieldrules``."""
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog processors and turn on output for ``fieldrules``."""
    settings = settings or get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer() if settings.LOG_JSON else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in list(library_logger.handlers):
        if isinstance(handler, RenderedLineHandler):
            library_logger.removeHandler(handler)

    handler = RenderedLineHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    library_logger.addHandler(handler)
    library_logger.setLevel(level)
