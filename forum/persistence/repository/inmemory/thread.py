"""In-memory thread repository for testing."""

from datetime import datetime
from itertools import count
from typing import Optional

from forum.domain.model import NewThread, Thread
from forum.domain.repository import ThreadRepository
from forum.domain.value import SortOrder, ThreadId, Vote


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self) -> None:
        self._threads: dict[ThreadId, Thread] = {}
        self._ids = count(1)

    async def add(self, thread: NewThread) -> Thread:
        """Store a thread under the next id."""
        stored = Thread(id=ThreadId(next(self._ids)), **thread.model_dump())
        self._threads[stored.id] = stored
        return stored

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        return self._threads.get(thread_id)

    async def find_many(
        self,
        forum: Optional[str] = None,
        user: Optional[str] = None,
        since: Optional[datetime] = None,
        order: SortOrder = SortOrder.DESC,
        limit: Optional[int] = None,
    ) -> list[Thread]:
        """Find threads of a forum or by a user, ordered by date."""
        threads = list(self._threads.values())
        if forum is not None:
            threads = [t for t in threads if t.forum == forum]
        elif user is not None:
            threads = [t for t in threads if t.user == user]
        if since is not None:
            threads = [t for t in threads if t.date >= since]
        threads.sort(key=lambda t: (t.date, t.id), reverse=order == SortOrder.DESC)
        if limit is not None:
            threads = threads[:limit]
        return threads

    async def update_content(
        self, thread_id: ThreadId, message: str, slug: str
    ) -> Optional[Thread]:
        """Replace a thread's message and slug."""
        return self._replace(thread_id, message=message, slug=slug)

    async def set_closed(self, thread_id: ThreadId, closed: bool) -> Optional[Thread]:
        """Open or close a thread."""
        return self._replace(thread_id, is_closed=closed)

    async def add_vote(self, thread_id: ThreadId, vote: Vote) -> Optional[Thread]:
        """Record a like or dislike."""
        thread = self._threads.get(thread_id)
        if thread is None:
            return None
        if vote == Vote.LIKE:
            return self._replace(
                thread_id, likes=thread.likes + 1, points=thread.points + 1
            )
        return self._replace(
            thread_id, dislikes=thread.dislikes + 1, points=thread.points - 1
        )

    async def adjust_posts(self, thread_id: ThreadId, delta: int) -> None:
        """Add ``delta`` to the post counter (minimum 0)."""
        thread = self._threads.get(thread_id)
        if thread:
            self._replace(thread_id, posts=max(thread.posts + delta, 0))

    async def set_deleted(
        self, thread_id: ThreadId, deleted: bool, posts: int
    ) -> Optional[Thread]:
        """Set the soft-delete flag and overwrite the post counter."""
        return self._replace(thread_id, is_deleted=deleted, posts=posts)

    async def count(self) -> int:
        """Count threads."""
        return len(self._threads)

    async def clear(self) -> None:
        """Remove every thread and restart ids at 1."""
        self._threads.clear()
        self._ids = count(1)

    def _replace(self, thread_id: ThreadId, **changes) -> Optional[Thread]:
        thread = self._threads.get(thread_id)
        if thread is None:
            return None
        updated = thread.model_copy(update=changes)
        self._threads[thread_id] = updated
        return updated
