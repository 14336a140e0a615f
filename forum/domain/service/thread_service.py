"""Thread domain service."""

from datetime import datetime

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model import NewThread, Thread
from forum.domain.repository import PostRepository, ThreadRepository
from forum.domain.value import SortOrder, ThreadId, Vote

from .base import Service


class ThreadService(Service):
    """Domain service for thread operations."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            post_repository: Post repository (cascading soft-deletes)
        """
        self.thread_repository = thread_repository
        self.post_repository = post_repository

    async def create_thread(self, new_thread: NewThread) -> Thread:
        """Create a thread.

        Args:
            new_thread: Thread fields

        Returns:
            Created thread
        """
        with logfire.span(
            "thread_service.create_thread",
            forum=new_thread.forum,
            slug=new_thread.slug,
        ):
            thread = await self.thread_repository.add(new_thread)
            logfire.info("Thread created", thread_id=thread.id, forum=thread.forum)
            return thread

    async def get_thread(self, thread_id: ThreadId) -> Thread:
        """Get a thread by ID.

        Raises:
            NotFoundError: If the thread does not exist
        """
        with logfire.span("thread_service.get_thread", thread_id=thread_id):
            thread = await self.thread_repository.find_by_id(thread_id)
            if thread is None:
                logfire.warn("Thread not found", thread_id=thread_id)
                raise NotFoundError("Thread", str(thread_id))
            return thread

    async def remove(self, thread_id: ThreadId) -> Thread:
        """Soft-delete a thread and all of its posts.

        The post counter drops to 0.

        Raises:
            NotFoundError: If the thread does not exist
        """
        with logfire.span("thread_service.remove", thread_id=thread_id):
            updated = await self.thread_repository.set_deleted(
                thread_id, deleted=True, posts=0
            )
            if updated is None:
                logfire.warn("Thread not found for removal", thread_id=thread_id)
                raise NotFoundError("Thread", str(thread_id))
            await self.post_repository.set_deleted_by_thread(thread_id, deleted=True)
            logfire.info("Thread removed", thread_id=thread_id)
            return updated

    async def restore(self, thread_id: ThreadId) -> Thread:
        """Restore a thread and all of its posts.

        The post counter is recomputed from the thread's posts.

        Raises:
            NotFoundError: If the thread does not exist
        """
        with logfire.span("thread_service.restore", thread_id=thread_id):
            posts = await self.post_repository.count(thread_id)
            updated = await self.thread_repository.set_deleted(
                thread_id, deleted=False, posts=posts
            )
            if updated is None:
                logfire.warn("Thread not found for restore", thread_id=thread_id)
                raise NotFoundError("Thread", str(thread_id))
            await self.post_repository.set_deleted_by_thread(thread_id, deleted=False)
            logfire.info("Thread restored", thread_id=thread_id, posts=posts)
            return updated

    async def list_threads(
        self,
        forum: str | None = None,
        user: str | None = None,
        since: datetime | None = None,
        order: SortOrder = SortOrder.DESC,
        limit: int | None = None,
    ) -> list[Thread]:
        """List threads of a forum, or by a user when no forum is given."""
        with logfire.span(
            "thread_service.list_threads",
            forum=forum,
            user=user,
            order=order.value,
            limit=limit,
        ):
            threads = await self.thread_repository.find_many(
                forum=forum, user=user, since=since, order=order, limit=limit
            )
            logfire.info("Threads listed", forum=forum, user=user, count=len(threads))
            return threads

    async def update(self, thread_id: ThreadId, message: str, slug: str) -> Thread:
        """Replace a thread's message and slug.

        Raises:
            NotFoundError: If the thread does not exist
        """
        with logfire.span("thread_service.update", thread_id=thread_id):
            updated = await self.thread_repository.update_content(
                thread_id, message, slug
            )
            if updated is None:
                logfire.warn("Thread not found for update", thread_id=thread_id)
                raise NotFoundError("Thread", str(thread_id))
            logfire.info("Thread updated", thread_id=thread_id)
            return updated

    async def close(self, thread_id: ThreadId) -> Thread:
        """Close a thread."""
        with logfire.span("thread_service.close", thread_id=thread_id):
            return await self._set_closed(thread_id, closed=True)

    async def open(self, thread_id: ThreadId) -> Thread:
        """Reopen a closed thread."""
        with logfire.span("thread_service.open", thread_id=thread_id):
            return await self._set_closed(thread_id, closed=False)

    async def vote(self, thread_id: ThreadId, value: int) -> Thread:
        """Like (``value > 0``) or dislike (``value < 0``) a thread.

        A zero vote changes nothing.

        Raises:
            NotFoundError: If the thread does not exist
        """
        with logfire.span("thread_service.vote", thread_id=thread_id, value=value):
            vote = Vote.from_value(value)
            if vote is None:
                return await self.get_thread(thread_id)

            updated = await self.thread_repository.add_vote(thread_id, vote)
            if updated is None:
                logfire.warn("Thread not found for vote", thread_id=thread_id)
                raise NotFoundError("Thread", str(thread_id))
            logfire.info("Thread voted", thread_id=thread_id, vote=vote.name)
            return updated

    async def _set_closed(self, thread_id: ThreadId, closed: bool) -> Thread:
        updated = await self.thread_repository.set_closed(thread_id, closed)
        if updated is None:
            logfire.warn("Thread not found", thread_id=thread_id)
            raise NotFoundError("Thread", str(thread_id))
        logfire.info(
            "Thread closed flag changed", thread_id=thread_id, is_closed=closed
        )
        return updated
