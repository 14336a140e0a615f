"""Maintenance service: store-wide reset and row counts."""

import logfire

from forum.domain.repository import PostRepository, ThreadRepository

from .base import Service


class MaintenanceService(Service):
    """Domain service for whole-store operations."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        post_repository: PostRepository,
    ) -> None:
        self.thread_repository = thread_repository
        self.post_repository = post_repository

    async def clear(self) -> None:
        """Remove all posts and threads."""
        with logfire.span("maintenance_service.clear"):
            await self.post_repository.clear()
            await self.thread_repository.clear()
            logfire.warn("Store cleared")

    async def status(self) -> dict[str, int]:
        """Count rows per table."""
        with logfire.span("maintenance_service.status"):
            return {
                "thread": await self.thread_repository.count(),
                "post": await self.post_repository.count(),
            }
