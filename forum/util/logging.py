"""Stdlib logging for third-party libraries.

Forum code logs through Logfire. uvicorn, SQLAlchemy and alembic use the
standard ``logging`` module, configured here.
"""

import logging
import sys

from forum.config import Settings

# Loggers that stay at WARNING unless debugging
_NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "alembic.runtime.migration")


def setup_logging(settings: Settings) -> None:
    """Route stdlib logs to stdout at ``settings.log_level``.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else settings.log_level

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    if not settings.debug:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(logging.getLogger().level),
    )
