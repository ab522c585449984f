#!/usr/bin/env python3
"""Serve the API with uvicorn.

Logfire is configured before the app module is imported, so failures while
building the app or its container are reported too.
"""

import sys

import logfire
import uvicorn

from life.config import Settings
from life.util.logging import setup_logging
from life.util.observability import configure_logfire

APP_PATH = "life.interface.api.app:app"


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Starting Life API",
        port=settings.api.port,
        environment=settings.environment,
    )

    try:
        uvicorn.run(
            APP_PATH,
            host="0.0.0.0",
            port=settings.api.port,
            log_level="debug" if settings.debug else "info",
            # Behind the load balancer in production; trust X-Forwarded-* there only
            proxy_headers=settings.is_production,
            # Logging is already configured above
            log_config=None,
        )
    except Exception:
        logfire.exception("Life API failed to start")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
