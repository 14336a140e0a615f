"""Wire models and field types shared by use cases.

Field names follow the public API of the forum: booleans are camelCase on
the wire (``isDeleted``), the materialized path keeps its snake_case names
(``first_path``/``last_path``), and dates use ``YYYY-MM-DD HH:MM:SS``.
Stored dates are naive UTC.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
)

from forum.domain.model import Post, Thread

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Largest value PostgreSQL accepts for LIMIT (bigint)
MAX_LIMIT = 2**63 - 1


def coerce_limit(value: Any) -> Optional[int]:
    """Turn a raw ``limit`` into a row count.

    Missing or blank means no limit. Anything that is not a non-negative
    integer counts as 0. Counts beyond ``MAX_LIMIT`` are capped.
    """
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return 0
    if not isinstance(value, int):
        try:
            value = int(str(value).strip())
        except ValueError:
            return 0
    return min(max(value, 0), MAX_LIMIT)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an offset-aware datetime to naive UTC; naive ones pass as-is."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


Limit = Annotated[Optional[int], BeforeValidator(coerce_limit)]
Since = Annotated[
    Optional[datetime],
    BeforeValidator(_blank_to_none),
    AfterValidator(to_naive_utc),
]
RequestDateTime = Annotated[datetime, AfterValidator(to_naive_utc)]
WireDateTime = Annotated[
    datetime,
    PlainSerializer(lambda value: value.strftime(DATE_FORMAT), return_type=str),
]


class WireModel(BaseModel):
    """Accepts both field names and camelCase aliases on input."""

    model_config = ConfigDict(populate_by_name=True)


class PostItem(WireModel):
    """Post as returned by the API."""

    id: int
    thread: int
    forum: str
    user: str
    message: str
    date: WireDateTime
    parent: Optional[int] = None
    is_approved: bool = Field(default=False, alias="isApproved")
    is_deleted: bool = Field(default=False, alias="isDeleted")
    is_edited: bool = Field(default=False, alias="isEdited")
    is_highlighted: bool = Field(default=False, alias="isHighlighted")
    is_spam: bool = Field(default=False, alias="isSpam")
    likes: int = 0
    dislikes: int = 0
    points: int = 0
    first_path: Optional[int] = None
    last_path: str = ""

    @classmethod
    def from_post(cls, post: Post) -> "PostItem":
        return cls(**post.model_dump())


class ThreadItem(WireModel):
    """Thread as returned by the API."""

    id: int
    forum: str
    user: str
    title: str
    slug: str
    message: str
    date: WireDateTime
    is_closed: bool = Field(default=False, alias="isClosed")
    is_deleted: bool = Field(default=False, alias="isDeleted")
    likes: int = 0
    dislikes: int = 0
    points: int = 0
    posts: int = 0

    @classmethod
    def from_thread(cls, thread: Thread) -> "ThreadItem":
        return cls(**thread.model_dump())


class PostRef(BaseModel):
    """Echo of the post a command was applied to."""

    post: int


class ThreadRef(BaseModel):
    """Echo of the thread a command was applied to."""

    thread: int
