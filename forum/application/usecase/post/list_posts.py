"""List posts use case."""

from typing import Optional

from pydantic import BaseModel, model_validator

from forum.application.usecase.base import BaseUseCase
from forum.application.usecase.common import Limit, PostItem, Since
from forum.domain.service import PostService, TreeQueryService
from forum.domain.value import SortOrder, ThreadId


class ListPostsRequest(BaseModel):
    """List posts request.

    Exactly one source is used; ``forum`` wins when both are given.
    """

    forum: Optional[str] = None
    thread: Optional[int] = None
    since: Since = None
    order: SortOrder = SortOrder.DESC
    limit: Limit = None

    @model_validator(mode="after")
    def _require_source(self) -> "ListPostsRequest":
        if not self.forum and self.thread is None:
            raise ValueError("Either forum or thread is required")
        return self


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]


class ListPostsUseCase(BaseUseCase):
    """Use case for the date-ordered listing of a forum's or thread's posts."""

    def __init__(
        self,
        post_service: PostService,
        tree_query_service: TreeQueryService,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service (forum listing)
            tree_query_service: Tree query service (thread listing)
        """
        self.post_service = post_service
        self.tree_query_service = tree_query_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request

        Returns:
            Posts ordered by date
        """
        if request.forum:
            posts = await self.post_service.list_by_forum(
                request.forum,
                since=request.since,
                order=request.order,
                limit=request.limit,
            )
        else:
            posts = await self.tree_query_service.list_flat(
                ThreadId(request.thread),
                since=request.since,
                order=request.order,
                limit=request.limit,
            )

        return ListPostsResponse(posts=[PostItem.from_post(p) for p in posts])
