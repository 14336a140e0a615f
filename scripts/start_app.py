#!/usr/bin/env python3
"""Serve the forum API with uvicorn."""

import sys

import logfire
import uvicorn

from forum.config import Settings
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire, reported_failure


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    # Must run before uvicorn imports forum.interface.api.app
    configure_logfire(settings)

    logfire.info(
        "Starting forum API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
    )
    with reported_failure("Forum API"):
        uvicorn.run(
            "forum.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
