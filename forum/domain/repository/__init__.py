"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from forum.domain.repository.post import PostRepository
from forum.domain.repository.thread import ThreadRepository

__all__ = [
    "PostRepository",
    "ThreadRepository",
]
