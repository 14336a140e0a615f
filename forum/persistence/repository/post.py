"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import asc, desc, func, insert, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import NewPost, Post
from forum.domain.repository import PostRepository
from forum.domain.value import PostId, PostPath, PostSort, SortOrder, ThreadId, Vote
from forum.persistence.error import storage_errors
from forum.persistence.mappers import new_post_to_dict, row_to_post
from forum.persistence.tables import post_table


def _direction(order: SortOrder):
    return asc if order == SortOrder.ASC else desc


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, post: NewPost) -> Post:
        """Insert a post and assign its id."""
        with logfire.span("post_repository.add", thread_id=post.thread):
            stmt = (
                insert(post_table)
                .values(**new_post_to_dict(post))
                .returning(post_table)
            )
            async with storage_errors("post_repository.add"):
                result = await self.session.execute(stmt)
                row = result.mappings().one()
                await self.session.flush()
            return row_to_post(dict(row))

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(post_table).where(post_table.c.id == post_id)
        async with storage_errors("post_repository.find_by_id"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def find_path(self, post_id: PostId) -> Optional[PostPath]:
        """Read a post's materialized path."""
        stmt = select(post_table.c.first_path, post_table.c.last_path).where(
            post_table.c.id == post_id
        )
        async with storage_errors("post_repository.find_path"):
            result = await self.session.execute(stmt)
            row = result.first()
        if row is None or row.first_path is None:
            return None
        return PostPath(first_path=row.first_path, last_path=row.last_path)

    async def set_path(self, post_id: PostId, path: PostPath) -> None:
        """Store a post's materialized path."""
        stmt = (
            update(post_table)
            .where(post_table.c.id == post_id)
            .values(first_path=path.first_path, last_path=path.last_path)
        )
        async with storage_errors("post_repository.set_path"):
            await self.session.execute(stmt)
            await self.session.flush()

    async def find_by_thread(
        self,
        thread_id: ThreadId,
        since: Optional[datetime] = None,
        sort: PostSort = PostSort.FLAT,
        order: SortOrder = SortOrder.DESC,
        limit: Optional[int] = None,
    ) -> List[Post]:
        """Find posts of a thread."""
        with logfire.span(
            "post_repository.find_by_thread",
            thread_id=thread_id,
            sort=sort.value,
            order=order.value,
            limit=limit,
        ):
            stmt = select(post_table).where(post_table.c.thread == thread_id)

            if since is not None:
                stmt = stmt.where(post_table.c.date >= since)

            direction = _direction(order)
            if sort == PostSort.FLAT:
                stmt = stmt.order_by(
                    direction(post_table.c.date), direction(post_table.c.id)
                )
            else:
                # Only the root grouping follows the direction
                stmt = stmt.order_by(
                    direction(post_table.c.first_path), asc(post_table.c.last_path)
                )

            if limit is not None:
                stmt = stmt.limit(limit)

            async with storage_errors("post_repository.find_by_thread"):
                result = await self.session.execute(stmt)
                rows = result.mappings().all()
            return [row_to_post(dict(row)) for row in rows]

    async def find_by_forum(
        self,
        forum: str,
        since: Optional[datetime] = None,
        order: SortOrder = SortOrder.DESC,
        limit: Optional[int] = None,
    ) -> List[Post]:
        """Find posts of a forum ordered by date."""
        stmt = select(post_table).where(post_table.c.forum == forum)

        if since is not None:
            stmt = stmt.where(post_table.c.date >= since)

        direction = _direction(order)
        stmt = stmt.order_by(direction(post_table.c.date), direction(post_table.c.id))

        if limit is not None:
            stmt = stmt.limit(limit)

        async with storage_errors("post_repository.find_by_forum"):
            result = await self.session.execute(stmt)
            rows = result.mappings().all()
        return [row_to_post(dict(row)) for row in rows]

    async def update_message(self, post_id: PostId, message: str) -> Optional[Post]:
        """Replace a post's message and mark it edited."""
        stmt = (
            update(post_table)
            .where(post_table.c.id == post_id)
            .values(message=message, is_edited=True)
            .returning(post_table)
        )
        return await self._update_one(stmt, "post_repository.update_message")

    async def set_deleted(self, post_id: PostId, deleted: bool) -> Optional[Post]:
        """Set a post's soft-delete flag."""
        stmt = (
            update(post_table)
            .where(post_table.c.id == post_id)
            .values(is_deleted=deleted)
            .returning(post_table)
        )
        return await self._update_one(stmt, "post_repository.set_deleted")

    async def set_deleted_by_thread(self, thread_id: ThreadId, deleted: bool) -> None:
        """Set the soft-delete flag on every post of a thread."""
        stmt = (
            update(post_table)
            .where(post_table.c.thread == thread_id)
            .values(is_deleted=deleted)
        )
        async with storage_errors("post_repository.set_deleted_by_thread"):
            await self.session.execute(stmt)
            await self.session.flush()

    async def add_vote(self, post_id: PostId, vote: Vote) -> Optional[Post]:
        """Record a like or dislike at SQL level."""
        if vote == Vote.LIKE:
            values = {"likes": post_table.c.likes + 1}
        else:
            values = {"dislikes": post_table.c.dislikes + 1}
        stmt = (
            update(post_table)
            .where(post_table.c.id == post_id)
            .values(points=post_table.c.points + vote.value, **values)
            .returning(post_table)
        )
        return await self._update_one(stmt, "post_repository.add_vote")

    async def count(self, thread_id: Optional[ThreadId] = None) -> int:
        """Count posts, optionally within one thread."""
        stmt = select(func.count()).select_from(post_table)
        if thread_id is not None:
            stmt = stmt.where(post_table.c.thread == thread_id)
        async with storage_errors("post_repository.count"):
            result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def clear(self) -> None:
        """Remove every post and reset the id sequence."""
        async with storage_errors("post_repository.clear"):
            await self.session.execute(text("TRUNCATE TABLE post RESTART IDENTITY"))
            await self.session.flush()

    async def _update_one(self, stmt, operation: str) -> Optional[Post]:
        async with storage_errors(operation):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            if row is None:
                return None
            await self.session.flush()
        return row_to_post(dict(row))
