"""Tree query service.

Lists the posts of a thread in one of three modes:

- ``flat``: by date
- ``tree``: by materialized path, ``limit`` caps rows
- ``parent_tree``: by materialized path, ``limit`` caps whole root trees
"""

from collections.abc import Iterable
from datetime import datetime

import logfire

from forum.domain.model import Post
from forum.domain.repository import PostRepository
from forum.domain.value import PostSort, SortOrder, ThreadId

from .base import Service


def take_root_trees(posts: Iterable[Post], root_limit: int) -> list[Post]:
    """Keep the posts of the first ``root_limit`` root trees.

    ``posts`` must be ordered so each root tree is contiguous, i.e. by
    ``(first_path, last_path)``.

    Args:
        posts: Posts in path order
        root_limit: Number of root trees to keep

    Returns:
        The leading posts belonging to at most ``root_limit`` distinct roots
    """
    result: list[Post] = []
    current_root: int | None = None
    roots_seen = 0
    for post in posts:
        if post.first_path != current_root:
            current_root = post.first_path
            roots_seen += 1
        if roots_seen > root_limit:
            break
        result.append(post)
    return result


class TreeQueryService(Service):
    """Domain service for hierarchy-aware post listings."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize tree query service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def list_flat(
        self,
        thread_id: ThreadId,
        since: datetime | None = None,
        order: SortOrder = SortOrder.DESC,
        limit: int | None = None,
    ) -> list[Post]:
        """List posts by date, ignoring the hierarchy."""
        with logfire.span(
            "tree_query_service.list_flat",
            thread_id=thread_id,
            order=order.value,
            limit=limit,
        ):
            return await self.post_repository.find_by_thread(
                thread_id, since=since, sort=PostSort.FLAT, order=order, limit=limit
            )

    async def list_tree(
        self,
        thread_id: ThreadId,
        since: datetime | None = None,
        order: SortOrder = SortOrder.DESC,
        limit: int | None = None,
    ) -> list[Post]:
        """List posts in tree order.

        ``order`` only flips the order of the root trees; replies inside a
        tree always stay in depth-first, creation order.
        """
        with logfire.span(
            "tree_query_service.list_tree",
            thread_id=thread_id,
            order=order.value,
            limit=limit,
        ):
            return await self.post_repository.find_by_thread(
                thread_id, since=since, sort=PostSort.TREE, order=order, limit=limit
            )

    async def list_root_limited(
        self,
        thread_id: ThreadId,
        since: datetime | None = None,
        root_limit: int = 0,
    ) -> list[Post]:
        """List complete reply trees for the first ``root_limit`` roots.

        Roots are taken in ascending path order whatever the requested
        direction.
        """
        with logfire.span(
            "tree_query_service.list_root_limited",
            thread_id=thread_id,
            root_limit=root_limit,
        ):
            posts = await self.post_repository.find_by_thread(
                thread_id, since=since, sort=PostSort.TREE, order=SortOrder.ASC
            )
            result = take_root_trees(posts, root_limit)
            logfire.debug(
                "Root trees selected",
                thread_id=thread_id,
                fetched=len(posts),
                returned=len(result),
            )
            return result

    async def list_posts(
        self,
        thread_id: ThreadId,
        sort: PostSort = PostSort.FLAT,
        since: datetime | None = None,
        order: SortOrder = SortOrder.DESC,
        limit: int | None = None,
    ) -> list[Post]:
        """Dispatch to the listing for ``sort``.

        Args:
            thread_id: Thread ID
            sort: Listing mode
            since: Only posts with ``date >= since``
            order: Listing direction (ignored by PARENT_TREE)
            limit: Row cap for FLAT/TREE (None for all), root cap for
                PARENT_TREE (None counts as 0)

        Returns:
            Posts in the requested order
        """
        if sort == PostSort.TREE:
            posts = await self.list_tree(thread_id, since, order, limit)
        elif sort == PostSort.PARENT_TREE:
            posts = await self.list_root_limited(thread_id, since, limit or 0)
        else:
            posts = await self.list_flat(thread_id, since, order, limit)

        logfire.info(
            "Thread posts listed",
            thread_id=thread_id,
            sort=sort.value,
            count=len(posts),
        )
        return posts
