"""Post domain service."""

from datetime import datetime

import logfire

from forum.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    ParentNotFoundError,
)
from forum.domain.model import NewPost, Post
from forum.domain.repository import PostRepository, ThreadRepository
from forum.domain.value import PostId, SortOrder, Vote

from .base import Service
from .hierarchy_service import HierarchyService


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        thread_repository: ThreadRepository,
        hierarchy_service: HierarchyService,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            thread_repository: Thread repository (post counters)
            hierarchy_service: Places new posts in their reply tree
        """
        self.post_repository = post_repository
        self.thread_repository = thread_repository
        self.hierarchy_service = hierarchy_service

    async def create_post(self, new_post: NewPost) -> Post:
        """Create a top-level post or a reply.

        Steps:
        1. Verify the thread exists
        2. Verify the parent exists and belongs to the same thread
        3. Insert the row (assigns the id)
        4. Attach the post to its reply tree
        5. Increment the thread's post counter

        Args:
            new_post: Post fields

        Returns:
            Created post with id and path

        Raises:
            NotFoundError: If the thread does not exist
            ParentNotFoundError: If the parent post does not exist
            BusinessRuleViolationError: If the parent is in another thread
        """
        with logfire.span(
            "post_service.create_post",
            thread_id=new_post.thread,
            parent_id=new_post.parent,
            user=new_post.user,
        ):
            thread = await self.thread_repository.find_by_id(new_post.thread)
            if thread is None:
                logfire.warn("Thread not found", thread_id=new_post.thread)
                raise NotFoundError("Thread", str(new_post.thread))

            if new_post.parent is not None:
                parent = await self.post_repository.find_by_id(new_post.parent)
                if parent is None:
                    logfire.warn("Parent post not found", parent_id=new_post.parent)
                    raise ParentNotFoundError(new_post.parent)
                if parent.thread != new_post.thread:
                    logfire.warn(
                        "Parent post does not belong to thread",
                        parent_id=new_post.parent,
                        parent_thread_id=parent.thread,
                        target_thread_id=new_post.thread,
                    )
                    raise BusinessRuleViolationError(
                        "Parent post does not belong to this thread"
                    )

            post = await self.post_repository.add(new_post)
            path = await self.hierarchy_service.attach(post.id, new_post.parent)
            await self.thread_repository.adjust_posts(new_post.thread, 1)

            logfire.info(
                "Post created",
                post_id=post.id,
                thread_id=post.thread,
                depth=path.depth,
            )
            return post.model_copy(
                update={"first_path": path.first_path, "last_path": path.last_path}
            )

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.get_post", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=post_id)
                raise NotFoundError("Post", str(post_id))
            return post

    async def list_by_forum(
        self,
        forum: str,
        since: datetime | None = None,
        order: SortOrder = SortOrder.DESC,
        limit: int | None = None,
    ) -> list[Post]:
        """List posts of a forum by date."""
        with logfire.span(
            "post_service.list_by_forum", forum=forum, order=order.value, limit=limit
        ):
            posts = await self.post_repository.find_by_forum(
                forum, since=since, order=order, limit=limit
            )
            logfire.info("Forum posts listed", forum=forum, count=len(posts))
            return posts

    async def update_message(self, post_id: PostId, message: str) -> Post:
        """Replace a post's message.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "post_service.update_message",
            post_id=post_id,
            message_length=len(message),
        ):
            updated = await self.post_repository.update_message(post_id, message)
            if updated is None:
                logfire.warn("Post not found for message update", post_id=post_id)
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post message updated", post_id=post_id)
            return updated

    async def remove(self, post_id: PostId) -> Post:
        """Soft-delete a post and decrement its thread's counter.

        Removing an already removed post leaves the counter unchanged.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.remove", post_id=post_id):
            return await self._set_deleted(post_id, deleted=True)

    async def restore(self, post_id: PostId) -> Post:
        """Undo a soft-delete and increment the thread's counter.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.restore", post_id=post_id):
            return await self._set_deleted(post_id, deleted=False)

    async def vote(self, post_id: PostId, value: int) -> Post:
        """Like (``value > 0``) or dislike (``value < 0``) a post.

        A zero vote changes nothing.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.vote", post_id=post_id, value=value):
            vote = Vote.from_value(value)
            if vote is None:
                return await self.get_post(post_id)

            updated = await self.post_repository.add_vote(post_id, vote)
            if updated is None:
                logfire.warn("Post not found for vote", post_id=post_id)
                raise NotFoundError("Post", str(post_id))
            logfire.info(
                "Post voted", post_id=post_id, vote=vote.name, points=updated.points
            )
            return updated

    async def _set_deleted(self, post_id: PostId, deleted: bool) -> Post:
        current = await self.post_repository.find_by_id(post_id)
        if current is None:
            logfire.warn("Post not found", post_id=post_id)
            raise NotFoundError("Post", str(post_id))
        if current.is_deleted == deleted:
            return current

        updated = await self.post_repository.set_deleted(post_id, deleted)
        if updated is None:
            raise NotFoundError("Post", str(post_id))
        await self.thread_repository.adjust_posts(updated.thread, -1 if deleted else 1)
        logfire.info(
            "Post deleted flag changed",
            post_id=post_id,
            thread_id=updated.thread,
            is_deleted=deleted,
        )
        return updated
