"""Vote on thread use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.application.usecase.common import ThreadItem
from forum.domain.service import ThreadService
from forum.domain.value import ThreadId


class VoteThreadRequest(BaseModel):
    """Vote request: positive likes, negative dislikes."""

    thread: int
    vote: int


class VoteThreadUseCase(BaseUseCase):
    """Use case for liking or disliking a thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: VoteThreadRequest) -> ThreadItem:
        thread = await self.thread_service.vote(
            ThreadId(request.thread), request.vote
        )
        return ThreadItem.from_thread(thread)
