"""Close and open thread use cases."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.application.usecase.common import ThreadRef
from forum.domain.service import ThreadService
from forum.domain.value import ThreadId


class CloseThreadRequest(BaseModel):
    """Close or open thread request."""

    thread: int


class CloseThreadUseCase(BaseUseCase):
    """Use case for closing a thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: CloseThreadRequest) -> ThreadRef:
        thread = await self.thread_service.close(ThreadId(request.thread))
        return ThreadRef(thread=thread.id)


class OpenThreadUseCase(BaseUseCase):
    """Use case for reopening a closed thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: CloseThreadRequest) -> ThreadRef:
        thread = await self.thread_service.open(ThreadId(request.thread))
        return ThreadRef(thread=thread.id)
