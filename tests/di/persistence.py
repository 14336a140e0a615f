"""Mock persistence provider for testing."""

from dishka import Scope, provide

from forum.domain.repository import PostRepository, ThreadRepository
from forum.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryThreadRepository,
)
from forum.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped: every container starts empty, and state
    survives across requests made through the same container (API tests).
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_thread_repository(self) -> ThreadRepository:
        """Provide in-memory thread repository."""
        return InMemoryThreadRepository()
