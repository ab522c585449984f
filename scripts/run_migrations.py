#!/usr/bin/env python3
"""Upgrade the database schema to head before the API starts.

Exits non-zero on failure so the deploy stops instead of serving against a
half-migrated schema.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from life.config import Settings
from life.util.observability import configure_logfire

ALEMBIC_INI = "alembic.ini"


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    # migrations/env.py takes the URL from Settings, not alembic.ini
    config = Config(ALEMBIC_INI)

    with logfire.span("migrations.upgrade", environment=settings.environment):
        try:
            command.upgrade(config, "head")
        except Exception:
            logfire.exception("Database migration failed")
            return 1

    logfire.info("Database schema is at head")
    return 0


if __name__ == "__main__":
    sys.exit(main())
