"""Logging configuration for the application."""

import logging
import sys

from life.config import Settings

# Libraries whose INFO output is per-request noise
QUIET_LOGGERS = ("httpx", "httpcore", "asyncpg")


class HealthCheckFilter(logging.Filter):
    """Drop uvicorn access lines for the health endpoint."""

    def filter(self, record: logging.LogRecord) -> bool:
        return "GET /health" not in record.getMessage()


def _level_for(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for route and script output.

    Domain services log through Logfire; this covers `logging.getLogger`
    users (routes, uvicorn, alembic).

    Args:
        settings: Application settings
    """
    level = _level_for(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # Sign-ins and account deletions stay visible even in production
    logging.getLogger("life").setLevel(min(level, logging.INFO))
    logging.getLogger("uvicorn.access").addFilter(HealthCheckFilter())

    logging.getLogger(__name__).info(
        f"Logging configured: environment={settings.environment}, "
        f"level={logging.getLevelName(level)}"
    )
