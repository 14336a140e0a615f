"""Create post use case."""

from typing import Optional

from pydantic import Field

from forum.application.usecase.base import BaseUseCase
from forum.application.usecase.common import PostItem, RequestDateTime, WireModel
from forum.domain.model import NewPost
from forum.domain.service import PostService
from forum.domain.value import PostId, ThreadId


class CreatePostRequest(WireModel):
    """Create post request."""

    thread: int
    forum: str
    user: str  # Author email
    message: str
    date: RequestDateTime
    parent: Optional[int] = None  # Post being replied to
    is_approved: bool = Field(default=False, alias="isApproved")
    is_deleted: bool = Field(default=False, alias="isDeleted")
    is_edited: bool = Field(default=False, alias="isEdited")
    is_highlighted: bool = Field(default=False, alias="isHighlighted")
    is_spam: bool = Field(default=False, alias="isSpam")


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a top-level post or a reply."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostItem:
        """Execute create post flow.

        The post service inserts the row, computes its materialized path
        from the parent and bumps the thread's post counter.

        Args:
            request: Create post request

        Returns:
            Created post including its path

        Raises:
            NotFoundError: If the thread does not exist
            ParentNotFoundError: If the parent post does not exist
            BusinessRuleViolationError: If the parent is in another thread
        """
        new_post = NewPost(
            thread=ThreadId(request.thread),
            forum=request.forum,
            user=request.user,
            message=request.message,
            date=request.date,
            parent=PostId(request.parent) if request.parent is not None else None,
            is_approved=request.is_approved,
            is_deleted=request.is_deleted,
            is_edited=request.is_edited,
            is_highlighted=request.is_highlighted,
            is_spam=request.is_spam,
        )
        post = await self.post_service.create_post(new_post)
        return PostItem.from_post(post)
