"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository
from .thread import InMemoryThreadRepository

__all__ = [
    "InMemoryPostRepository",
    "InMemoryThreadRepository",
]
