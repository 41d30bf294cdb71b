"""Logging setup for processes embedding the engine."""

import logging

import structlog

from infrastructure.config import get_log_level


def configure_logging(level: str = "") -> None:
    """Configure stdlib logging and structlog.

    Domain services log through ``logging``; the orchestrator logs
    key/value events through structlog. Both honour LOG_LEVEL.
    """
    level_name = (level or get_log_level()).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
    )
