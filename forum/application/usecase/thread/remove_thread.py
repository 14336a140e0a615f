"""Remove and restore thread use cases."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.application.usecase.common import ThreadRef
from forum.domain.service import ThreadService
from forum.domain.value import ThreadId


class RemoveThreadRequest(BaseModel):
    """Remove or restore thread request."""

    thread: int


class RemoveThreadUseCase(BaseUseCase):
    """Use case for soft-deleting a thread together with its posts."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: RemoveThreadRequest) -> ThreadRef:
        """Mark the thread and every post in it deleted; ``posts`` drops to 0.

        Raises:
            NotFoundError: If the thread does not exist
        """
        thread = await self.thread_service.remove(ThreadId(request.thread))
        return ThreadRef(thread=thread.id)


class RestoreThreadUseCase(BaseUseCase):
    """Use case for restoring a thread together with its posts."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: RemoveThreadRequest) -> ThreadRef:
        """Clear the deleted flags and recount ``posts``.

        Raises:
            NotFoundError: If the thread does not exist
        """
        thread = await self.thread_service.restore(ThreadId(request.thread))
        return ThreadRef(thread=thread.id)
