"""Persistence layer errors."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import logfire
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

UNIQUE_VIOLATION = "23505"


class StorageError(Exception):
    """Base storage error (connection failures, failed statements)."""

    pass


class DuplicateKeyError(StorageError):
    """Unique or primary key violation."""

    pass


def _sqlstate(error: IntegrityError) -> Optional[str]:
    # The asyncpg adapter copies the driver's sqlstate onto the DBAPI error
    for source in (error.orig, getattr(error.orig, "__cause__", None)):
        code = getattr(source, "sqlstate", None) or getattr(source, "pgcode", None)
        if code:
            return code
    return None


@asynccontextmanager
async def storage_errors(operation: str) -> AsyncIterator[None]:
    """Translate SQLAlchemy errors raised inside the block into StorageError.

    Only unique violations become ``DuplicateKeyError``; foreign key and
    check violations are plain storage failures.

    Args:
        operation: Repository operation name, used in logs and messages
    """
    try:
        yield
    except IntegrityError as e:
        sqlstate = _sqlstate(e)
        logfire.error(
            "Integrity violation", operation=operation, sqlstate=sqlstate, error=str(e)
        )
        if sqlstate == UNIQUE_VIOLATION:
            raise DuplicateKeyError(f"{operation}: {e.orig}") from e
        raise StorageError(f"{operation}: {e.orig}") from e
    except SQLAlchemyError as e:
        logfire.error("Storage failure", operation=operation, error=str(e))
        raise StorageError(f"{operation}: {e}") from e
