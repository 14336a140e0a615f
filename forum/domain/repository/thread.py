"""Thread repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from forum.domain.model.thread import NewThread, Thread
from forum.domain.value import SortOrder, ThreadId, Vote


class ThreadRepository(ABC):
    """Repository for Thread entity."""

    @abstractmethod
    async def add(self, thread: NewThread) -> Thread:
        """Insert a thread and assign its id.

        Args:
            thread: Thread fields

        Returns:
            The stored thread with its new id
        """
        pass

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID.

        Args:
            thread_id: The thread's unique identifier

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_many(
        self,
        forum: Optional[str] = None,
        user: Optional[str] = None,
        since: Optional[datetime] = None,
        order: SortOrder = SortOrder.DESC,
        limit: Optional[int] = None,
    ) -> List[Thread]:
        """Find threads of a forum or by a user, ordered by date.

        Args:
            forum: Forum short name filter
            user: Author filter, used when ``forum`` is None
            since: Only threads with ``date >= since``
            order: Date direction
            limit: Maximum number of rows, None for all

        Returns:
            Matching threads
        """
        pass

    @abstractmethod
    async def update_content(
        self, thread_id: ThreadId, message: str, slug: str
    ) -> Optional[Thread]:
        """Replace a thread's message and slug.

        Returns:
            Updated thread, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def set_closed(self, thread_id: ThreadId, closed: bool) -> Optional[Thread]:
        """Open or close a thread.

        Returns:
            Updated thread, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def add_vote(self, thread_id: ThreadId, vote: Vote) -> Optional[Thread]:
        """Record a like or dislike and adjust points accordingly.

        Returns:
            Updated thread, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def adjust_posts(self, thread_id: ThreadId, delta: int) -> None:
        """Add ``delta`` to the thread's post counter at SQL level.

        Args:
            thread_id: The thread ID
            delta: Signed change, usually +1 or -1
        """
        pass

    @abstractmethod
    async def set_deleted(
        self, thread_id: ThreadId, deleted: bool, posts: int
    ) -> Optional[Thread]:
        """Set the soft-delete flag and overwrite the post counter.

        Args:
            thread_id: The thread ID
            deleted: New soft-delete flag
            posts: New post counter value

        Returns:
            Updated thread, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count threads (deleted included)."""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove every thread."""
        pass
