"""Post entity.

Posts are messages inside a thread. A post either starts a new reply tree
(no parent) or replies to another post of the same thread. Tree position is
kept as a materialized path, see ``forum.domain.value.path``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import PostId, PostPath, ThreadId


class NewPost(DomainModel):
    """Post fields known before the store assigns an id."""

    thread: ThreadId
    forum: str
    user: str
    message: str
    date: datetime
    parent: Optional[PostId] = None
    is_approved: bool = False
    is_deleted: bool = False
    is_edited: bool = False
    is_highlighted: bool = False
    is_spam: bool = False


class Post(NewPost):
    """Stored post.

    ``first_path`` is None only between the insert and the path update that
    immediately follows it.
    """

    id: PostId
    likes: int = Field(default=0, ge=0)
    dislikes: int = Field(default=0, ge=0)
    points: int = 0
    first_path: Optional[int] = None
    last_path: str = ""

    @property
    def path(self) -> Optional[PostPath]:
        """Materialized path, once attached."""
        if self.first_path is None:
            return None
        return PostPath(first_path=self.first_path, last_path=self.last_path)
