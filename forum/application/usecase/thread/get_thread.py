"""Get thread use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.application.usecase.common import ThreadItem
from forum.domain.service import ThreadService
from forum.domain.value import ThreadId


class GetThreadRequest(BaseModel):
    """Get thread request."""

    thread: int


class GetThreadUseCase(BaseUseCase):
    """Use case for reading a single thread with its counters."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: GetThreadRequest) -> ThreadItem:
        """Return the thread.

        Raises:
            NotFoundError: If the thread does not exist
        """
        thread = await self.thread_service.get_thread(ThreadId(request.thread))
        return ThreadItem.from_thread(thread)
