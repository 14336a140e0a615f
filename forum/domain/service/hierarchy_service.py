"""Post hierarchy service.

Maintains the materialized path of each post (see
``forum.domain.value.path``). Paths are computed once, right after the store
assigns the post its id, and never renumbered afterwards.
"""

import logfire

from forum.domain.error import ParentNotFoundError
from forum.domain.repository import PostRepository
from forum.domain.value import PostId, PostPath
from forum.domain.value.path import DEFAULT_SEGMENT_WIDTH

from .base import Service


class HierarchyService(Service):
    """Domain service placing new posts into their reply tree."""

    def __init__(
        self,
        post_repository: PostRepository,
        segment_width: int = DEFAULT_SEGMENT_WIDTH,
    ) -> None:
        """Initialize hierarchy service.

        Args:
            post_repository: Post repository
            segment_width: Minimum digits per path segment
        """
        self.post_repository = post_repository
        self.segment_width = segment_width

    async def attach(self, post_id: PostId, parent_id: PostId | None) -> PostPath:
        """Compute and store the path of a freshly inserted post.

        The parent's path is read, then the child's path is written. The two
        steps are not locked: siblings attached concurrently still get
        distinct paths since each suffix is built from the child's own id.

        Args:
            post_id: Id just assigned to the post
            parent_id: Parent post id, None for a top-level post

        Returns:
            The stored path

        Raises:
            ParentNotFoundError: If the parent post has no stored path
        """
        with logfire.span(
            "hierarchy_service.attach",
            post_id=post_id,
            parent_id=parent_id,
        ):
            if parent_id is None:
                path = PostPath.root(post_id)
            else:
                parent_path = await self.post_repository.find_path(parent_id)
                if parent_path is None:
                    logfire.error(
                        "Parent post not found",
                        post_id=post_id,
                        parent_id=parent_id,
                    )
                    raise ParentNotFoundError(parent_id)
                path = parent_path.child(post_id, self.segment_width)

            await self.post_repository.set_path(post_id, path)
            logfire.debug(
                "Post attached",
                post_id=post_id,
                first_path=path.first_path,
                last_path=path.last_path,
            )
            return path
