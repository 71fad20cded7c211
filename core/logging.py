# WORKFLOW: Logging setup for command line entry points.
# Used by: scripts/seed.py
# Configures the stdlib root logger (module loggers) and structlog
# (run-level key/value events from the pipeline orchestrator).

import logging
from typing import Optional

import structlog

from core.config import settings


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure stdlib logging and route structlog through it.

    Args:
        level: Log level name, defaults to ``settings.log_level``
    """
    level_name = (level or settings.log_level).upper()

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=settings.log_format,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
