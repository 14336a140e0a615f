"""PostgreSQL repository implementations."""

from forum.persistence.repository.post import PostgresPostRepository
from forum.persistence.repository.thread import PostgresThreadRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresThreadRepository",
]
