"""List thread posts use case.

Front door of the tree query engine: picks the flat, tree or root-limited
listing and normalizes ``limit`` before it reaches the domain.
"""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.application.usecase.common import Limit, PostItem, Since
from forum.domain.service import TreeQueryService
from forum.domain.value import PostSort, SortOrder, ThreadId


class ListThreadPostsRequest(BaseModel):
    """List thread posts request.

    ``limit`` caps rows for ``flat`` and ``tree`` and caps root trees for
    ``parent_tree``. A missing limit means no cap, except for
    ``parent_tree`` where it selects nothing. Non-numeric and negative
    limits are read as 0.
    """

    thread: int
    since: Since = None
    order: SortOrder = SortOrder.DESC
    sort: PostSort = PostSort.FLAT
    limit: Limit = None


class ListThreadPostsResponse(BaseModel):
    """List thread posts response."""

    posts: list[PostItem]


class ListThreadPostsUseCase(BaseUseCase):
    """Use case for listing a thread's posts in flat or tree order."""

    def __init__(self, tree_query_service: TreeQueryService) -> None:
        """Initialize list thread posts use case.

        Args:
            tree_query_service: Tree query domain service
        """
        self.tree_query_service = tree_query_service

    async def execute(self, request: ListThreadPostsRequest) -> ListThreadPostsResponse:
        """Execute list thread posts flow.

        Args:
            request: Listing parameters

        Returns:
            Posts in the order requested by ``sort`` and ``order``
        """
        posts = await self.tree_query_service.list_posts(
            ThreadId(request.thread),
            sort=request.sort,
            since=request.since,
            order=request.order,
            limit=request.limit,
        )
        return ListThreadPostsResponse(posts=[PostItem.from_post(p) for p in posts])
