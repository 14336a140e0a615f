"""Thread entity."""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import ThreadId


class NewThread(DomainModel):
    """Thread fields known before the store assigns an id."""

    forum: str
    user: str
    title: str
    slug: str
    message: str
    date: datetime
    is_closed: bool = False
    is_deleted: bool = False


class Thread(NewThread):
    """Stored thread.

    ``posts`` counts the thread's posts that are not deleted. It is maintained
    with SQL-level increments and is best-effort under concurrent writes.
    """

    id: ThreadId
    likes: int = Field(default=0, ge=0)
    dislikes: int = Field(default=0, ge=0)
    points: int = 0
    posts: int = Field(default=0, ge=0)
