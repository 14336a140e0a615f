"""Create thread use case."""

from pydantic import Field

from forum.application.usecase.base import BaseUseCase
from forum.application.usecase.common import RequestDateTime, ThreadItem, WireModel
from forum.domain.model import NewThread
from forum.domain.service import ThreadService


class CreateThreadRequest(WireModel):
    """Create thread request."""

    forum: str
    user: str
    title: str
    slug: str
    message: str
    date: RequestDateTime
    is_closed: bool = Field(default=False, alias="isClosed")
    is_deleted: bool = Field(default=False, alias="isDeleted")


class CreateThreadUseCase(BaseUseCase):
    """Use case for opening a new thread in a forum."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize create thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: CreateThreadRequest) -> ThreadItem:
        new_thread = NewThread(
            forum=request.forum,
            user=request.user,
            title=request.title,
            slug=request.slug,
            message=request.message,
            date=request.date,
            is_closed=request.is_closed,
            is_deleted=request.is_deleted,
        )
        thread = await self.thread_service.create_thread(new_thread)
        return ThreadItem.from_thread(thread)
