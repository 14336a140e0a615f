"""In-memory post repository for testing."""

from datetime import datetime
from itertools import count
from typing import Optional

from forum.domain.model import NewPost, Post
from forum.domain.repository import PostRepository
from forum.domain.value import PostId, PostPath, PostSort, SortOrder, ThreadId, Vote


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._ids = count(1)

    async def add(self, post: NewPost) -> Post:
        """Store a post under the next id."""
        stored = Post(id=PostId(next(self._ids)), **post.model_dump())
        self._posts[stored.id] = stored
        return stored

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_path(self, post_id: PostId) -> Optional[PostPath]:
        """Read a post's materialized path."""
        post = self._posts.get(post_id)
        return post.path if post else None

    async def set_path(self, post_id: PostId, path: PostPath) -> None:
        """Store a post's materialized path."""
        self._replace(
            post_id, first_path=path.first_path, last_path=path.last_path
        )

    async def find_by_thread(
        self,
        thread_id: ThreadId,
        since: Optional[datetime] = None,
        sort: PostSort = PostSort.FLAT,
        order: SortOrder = SortOrder.DESC,
        limit: Optional[int] = None,
    ) -> list[Post]:
        """Find posts of a thread."""
        posts = [p for p in self._posts.values() if p.thread == thread_id]
        if since is not None:
            posts = [p for p in posts if p.date >= since]

        reverse = order == SortOrder.DESC
        if sort == PostSort.FLAT:
            posts.sort(key=lambda p: (p.date, p.id), reverse=reverse)
        else:
            # Two stable sorts: replies ascending, then roots in direction
            posts.sort(key=lambda p: p.last_path)
            posts.sort(key=lambda p: p.first_path or 0, reverse=reverse)

        if limit is not None:
            posts = posts[:limit]
        return posts

    async def find_by_forum(
        self,
        forum: str,
        since: Optional[datetime] = None,
        order: SortOrder = SortOrder.DESC,
        limit: Optional[int] = None,
    ) -> list[Post]:
        """Find posts of a forum ordered by date."""
        posts = [p for p in self._posts.values() if p.forum == forum]
        if since is not None:
            posts = [p for p in posts if p.date >= since]
        posts.sort(key=lambda p: (p.date, p.id), reverse=order == SortOrder.DESC)
        if limit is not None:
            posts = posts[:limit]
        return posts

    async def update_message(self, post_id: PostId, message: str) -> Optional[Post]:
        """Replace a post's message and mark it edited."""
        return self._replace(post_id, message=message, is_edited=True)

    async def set_deleted(self, post_id: PostId, deleted: bool) -> Optional[Post]:
        """Set a post's soft-delete flag."""
        return self._replace(post_id, is_deleted=deleted)

    async def set_deleted_by_thread(self, thread_id: ThreadId, deleted: bool) -> None:
        """Set the soft-delete flag on every post of a thread."""
        for post in list(self._posts.values()):
            if post.thread == thread_id:
                self._replace(post.id, is_deleted=deleted)

    async def add_vote(self, post_id: PostId, vote: Vote) -> Optional[Post]:
        """Record a like or dislike."""
        post = self._posts.get(post_id)
        if post is None:
            return None
        if vote == Vote.LIKE:
            return self._replace(
                post_id, likes=post.likes + 1, points=post.points + 1
            )
        return self._replace(
            post_id, dislikes=post.dislikes + 1, points=post.points - 1
        )

    async def count(self, thread_id: Optional[ThreadId] = None) -> int:
        """Count posts, optionally within one thread."""
        if thread_id is None:
            return len(self._posts)
        return sum(1 for p in self._posts.values() if p.thread == thread_id)

    async def clear(self) -> None:
        """Remove every post and restart ids at 1."""
        self._posts.clear()
        self._ids = count(1)

    def _replace(self, post_id: PostId, **changes) -> Optional[Post]:
        post = self._posts.get(post_id)
        if post is None:
            return None
        updated = post.model_copy(update=changes)
        self._posts[post_id] = updated
        return updated
