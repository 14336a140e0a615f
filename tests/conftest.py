"""Test configuration and helpers."""

from datetime import datetime, timedelta
from typing import Optional

from forum.domain.model import NewPost, NewThread
from forum.domain.value import PostId, ThreadId

BASE_DATE = datetime(2014, 1, 1, 0, 0, 1)


def make_thread(
    forum: str = "forum1",
    user: str = "user1@mail.ru",
    slug: str = "thread-slug",
    date: Optional[datetime] = None,
) -> NewThread:
    """Build thread fields for tests."""
    return NewThread(
        forum=forum,
        user=user,
        title="Thread title",
        slug=slug,
        message="Thread message",
        date=date or BASE_DATE,
    )


def make_post(
    thread_id: int,
    parent: Optional[int] = None,
    minutes: int = 0,
    forum: str = "forum1",
    user: str = "user1@mail.ru",
    message: str = "Post message",
) -> NewPost:
    """Build post fields for tests.

    ``minutes`` offsets the post date from ``BASE_DATE`` so tests can
    control date ordering.
    """
    return NewPost(
        thread=ThreadId(thread_id),
        forum=forum,
        user=user,
        message=message,
        date=BASE_DATE + timedelta(minutes=minutes),
        parent=PostId(parent) if parent is not None else None,
    )
