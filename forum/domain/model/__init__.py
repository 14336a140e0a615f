"""Domain model entities for the forum."""

from forum.domain.model.post import NewPost, Post
from forum.domain.model.thread import NewThread, Thread

__all__ = [
    "NewPost",
    "NewThread",
    "Post",
    "Thread",
]
