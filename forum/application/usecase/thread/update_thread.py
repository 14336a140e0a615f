"""Update thread use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.application.usecase.common import ThreadItem
from forum.domain.service import ThreadService
from forum.domain.value import ThreadId


class UpdateThreadRequest(BaseModel):
    """Update thread request."""

    thread: int
    message: str
    slug: str


class UpdateThreadUseCase(BaseUseCase):
    """Use case for replacing a thread's message and slug."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: UpdateThreadRequest) -> ThreadItem:
        thread = await self.thread_service.update(
            ThreadId(request.thread), request.message, request.slug
        )
        return ThreadItem.from_thread(thread)
