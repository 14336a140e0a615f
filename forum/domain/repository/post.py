"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from forum.domain.model.post import NewPost, Post
from forum.domain.value import PostId, PostPath, PostSort, SortOrder, ThreadId, Vote


class PostRepository(ABC):
    """Repository for Post entity.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def add(self, post: NewPost) -> Post:
        """Insert a post and assign its id.

        The returned post has no path yet; callers attach it right after.

        Args:
            post: Post fields

        Returns:
            The stored post with its new id
        """
        pass

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_path(self, post_id: PostId) -> Optional[PostPath]:
        """Read a post's materialized path.

        Args:
            post_id: The post's unique identifier

        Returns:
            The path, or None if the post does not exist or has no path yet
        """
        pass

    @abstractmethod
    async def set_path(self, post_id: PostId, path: PostPath) -> None:
        """Store a post's materialized path.

        Args:
            post_id: The post's unique identifier
            path: Path computed from the parent's path
        """
        pass

    @abstractmethod
    async def find_by_thread(
        self,
        thread_id: ThreadId,
        since: Optional[datetime] = None,
        sort: PostSort = PostSort.FLAT,
        order: SortOrder = SortOrder.DESC,
        limit: Optional[int] = None,
    ) -> List[Post]:
        """Find posts of a thread.

        Ordering by ``sort``:
        - FLAT: ``date`` in ``order`` (ties broken by id)
        - TREE: ``first_path`` in ``order``, then ``last_path`` ascending

        Args:
            thread_id: The thread ID
            since: Only posts with ``date >= since``
            sort: FLAT or TREE (PARENT_TREE is handled by the tree query service)
            order: Direction of the primary sort key
            limit: Maximum number of rows, None for all

        Returns:
            Matching posts in the requested order
        """
        pass

    @abstractmethod
    async def find_by_forum(
        self,
        forum: str,
        since: Optional[datetime] = None,
        order: SortOrder = SortOrder.DESC,
        limit: Optional[int] = None,
    ) -> List[Post]:
        """Find posts of a forum ordered by date.

        Args:
            forum: Forum short name
            since: Only posts with ``date >= since``
            order: Date direction
            limit: Maximum number of rows, None for all

        Returns:
            Matching posts
        """
        pass

    @abstractmethod
    async def update_message(self, post_id: PostId, message: str) -> Optional[Post]:
        """Replace a post's message and mark it edited.

        Returns:
            Updated post, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def set_deleted(self, post_id: PostId, deleted: bool) -> Optional[Post]:
        """Set a post's soft-delete flag.

        Returns:
            Updated post, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def set_deleted_by_thread(self, thread_id: ThreadId, deleted: bool) -> None:
        """Set the soft-delete flag on every post of a thread."""
        pass

    @abstractmethod
    async def add_vote(self, post_id: PostId, vote: Vote) -> Optional[Post]:
        """Record a like or dislike and adjust points by the vote value.

        Uses SQL-level increments to avoid lost updates.

        Returns:
            Updated post, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def count(self, thread_id: Optional[ThreadId] = None) -> int:
        """Count posts, optionally within one thread (deleted included)."""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove every post."""
        pass
