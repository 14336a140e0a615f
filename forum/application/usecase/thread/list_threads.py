"""List threads use case."""

from typing import Optional

from pydantic import BaseModel, model_validator

from forum.application.usecase.base import BaseUseCase
from forum.application.usecase.common import Limit, Since, ThreadItem
from forum.domain.service import ThreadService
from forum.domain.value import SortOrder


class ListThreadsRequest(BaseModel):
    """List threads request; ``forum`` wins over ``user``."""

    forum: Optional[str] = None
    user: Optional[str] = None
    since: Since = None
    order: SortOrder = SortOrder.DESC
    limit: Limit = None

    @model_validator(mode="after")
    def _require_source(self) -> "ListThreadsRequest":
        if not self.forum and not self.user:
            raise ValueError("Either forum or user is required")
        return self


class ListThreadsResponse(BaseModel):
    """List threads response."""

    threads: list[ThreadItem]


class ListThreadsUseCase(BaseUseCase):
    """Use case for listing threads by date."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: ListThreadsRequest) -> ListThreadsResponse:
        threads = await self.thread_service.list_threads(
            forum=request.forum or None,
            user=request.user if not request.forum else None,
            since=request.since,
            order=request.order,
            limit=request.limit,
        )
        return ListThreadsResponse(
            threads=[ThreadItem.from_thread(t) for t in threads]
        )
