"""PostgreSQL implementation of Thread repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import asc, desc, func, insert, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import NewThread, Thread
from forum.domain.repository import ThreadRepository
from forum.domain.value import SortOrder, ThreadId, Vote
from forum.persistence.error import storage_errors
from forum.persistence.mappers import new_thread_to_dict, row_to_thread
from forum.persistence.tables import thread_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, thread: NewThread) -> Thread:
        """Insert a thread and assign its id."""
        with logfire.span("thread_repository.add", forum=thread.forum):
            stmt = (
                insert(thread_table)
                .values(**new_thread_to_dict(thread))
                .returning(thread_table)
            )
            async with storage_errors("thread_repository.add"):
                result = await self.session.execute(stmt)
                row = result.mappings().one()
                await self.session.flush()
            return row_to_thread(dict(row))

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        stmt = select(thread_table).where(thread_table.c.id == thread_id)
        async with storage_errors("thread_repository.find_by_id"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_thread(dict(row)) if row else None

    async def find_many(
        self,
        forum: Optional[str] = None,
        user: Optional[str] = None,
        since: Optional[datetime] = None,
        order: SortOrder = SortOrder.DESC,
        limit: Optional[int] = None,
    ) -> List[Thread]:
        """Find threads of a forum or by a user, ordered by date."""
        stmt = select(thread_table)

        if forum is not None:
            stmt = stmt.where(thread_table.c.forum == forum)
        elif user is not None:
            stmt = stmt.where(thread_table.c.user == user)

        if since is not None:
            stmt = stmt.where(thread_table.c.date >= since)

        direction = asc if order == SortOrder.ASC else desc
        stmt = stmt.order_by(
            direction(thread_table.c.date), direction(thread_table.c.id)
        )

        if limit is not None:
            stmt = stmt.limit(limit)

        async with storage_errors("thread_repository.find_many"):
            result = await self.session.execute(stmt)
            rows = result.mappings().all()
        return [row_to_thread(dict(row)) for row in rows]

    async def update_content(
        self, thread_id: ThreadId, message: str, slug: str
    ) -> Optional[Thread]:
        """Replace a thread's message and slug."""
        stmt = (
            update(thread_table)
            .where(thread_table.c.id == thread_id)
            .values(message=message, slug=slug)
            .returning(thread_table)
        )
        return await self._update_one(stmt, "thread_repository.update_content")

    async def set_closed(self, thread_id: ThreadId, closed: bool) -> Optional[Thread]:
        """Open or close a thread."""
        stmt = (
            update(thread_table)
            .where(thread_table.c.id == thread_id)
            .values(is_closed=closed)
            .returning(thread_table)
        )
        return await self._update_one(stmt, "thread_repository.set_closed")

    async def add_vote(self, thread_id: ThreadId, vote: Vote) -> Optional[Thread]:
        """Record a like or dislike at SQL level."""
        if vote == Vote.LIKE:
            values = {"likes": thread_table.c.likes + 1}
        else:
            values = {"dislikes": thread_table.c.dislikes + 1}
        stmt = (
            update(thread_table)
            .where(thread_table.c.id == thread_id)
            .values(points=thread_table.c.points + vote.value, **values)
            .returning(thread_table)
        )
        return await self._update_one(stmt, "thread_repository.add_vote")

    async def adjust_posts(self, thread_id: ThreadId, delta: int) -> None:
        """Add ``delta`` to the post counter (never below 0)."""
        stmt = (
            update(thread_table)
            .where(thread_table.c.id == thread_id)
            .values(posts=func.greatest(thread_table.c.posts + delta, 0))
        )
        async with storage_errors("thread_repository.adjust_posts"):
            await self.session.execute(stmt)
            await self.session.flush()

    async def set_deleted(
        self, thread_id: ThreadId, deleted: bool, posts: int
    ) -> Optional[Thread]:
        """Set the soft-delete flag and overwrite the post counter."""
        stmt = (
            update(thread_table)
            .where(thread_table.c.id == thread_id)
            .values(is_deleted=deleted, posts=posts)
            .returning(thread_table)
        )
        return await self._update_one(stmt, "thread_repository.set_deleted")

    async def count(self) -> int:
        """Count threads."""
        stmt = select(func.count()).select_from(thread_table)
        async with storage_errors("thread_repository.count"):
            result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def clear(self) -> None:
        """Remove every thread and reset the id sequence."""
        async with storage_errors("thread_repository.clear"):
            await self.session.execute(
                text("TRUNCATE TABLE thread RESTART IDENTITY CASCADE")
            )
            await self.session.flush()

    async def _update_one(self, stmt, operation: str) -> Optional[Thread]:
        async with storage_errors(operation):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            if row is None:
                return None
            await self.session.flush()
        return row_to_thread(dict(row))
