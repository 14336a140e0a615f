#!/usr/bin/env python3
"""Upgrade the forum schema to the latest Alembic revision.

Run before starting the API; ``alembic.ini`` is read from the working
directory and the database URL from ``DATABASE__URL``.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire, reported_failure


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with reported_failure("Schema upgrade"), logfire.span("run_migrations"):
        command.upgrade(Config("alembic.ini"), "head")

    logfire.info("Schema at head")
    return 0


if __name__ == "__main__":
    sys.exit(main())
