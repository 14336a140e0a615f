"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict

from forum.domain.model import NewPost, NewThread, Post, Thread
from forum.domain.value import PostId, ThreadId


def row_to_thread(row: Dict[str, Any]) -> Thread:
    """Convert database row to Thread domain model.

    Args:
        row: Database row as dict

    Returns:
        Thread domain model
    """
    return Thread(
        id=ThreadId(row["id"]),
        forum=row["forum"],
        user=row["user"],
        title=row["title"],
        slug=row["slug"],
        message=row["message"],
        date=row["date"],
        is_closed=row["is_closed"],
        is_deleted=row["is_deleted"],
        likes=row["likes"],
        dislikes=row["dislikes"],
        points=row["points"],
        posts=row["posts"],
    )


def new_thread_to_dict(thread: NewThread) -> Dict[str, Any]:
    """Convert NewThread to a dict suitable for insertion."""
    return thread.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        thread=ThreadId(row["thread"]),
        forum=row["forum"],
        user=row["user"],
        message=row["message"],
        date=row["date"],
        parent=PostId(row["parent"]) if row.get("parent") is not None else None,
        is_approved=row["is_approved"],
        is_deleted=row["is_deleted"],
        is_edited=row["is_edited"],
        is_highlighted=row["is_highlighted"],
        is_spam=row["is_spam"],
        likes=row["likes"],
        dislikes=row["dislikes"],
        points=row["points"],
        first_path=row.get("first_path"),
        last_path=row.get("last_path") or "",
    )


def new_post_to_dict(post: NewPost) -> Dict[str, Any]:
    """Convert NewPost to a dict suitable for insertion.

    Path columns are left out; they are written by the hierarchy service
    once the id is known.
    """
    return post.model_dump()
