"""Remove and restore post use cases."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.application.usecase.common import PostRef
from forum.domain.service import PostService
from forum.domain.value import PostId


class RemovePostRequest(BaseModel):
    """Remove or restore post request."""

    post: int


class RemovePostUseCase(BaseUseCase):
    """Use case for soft-deleting a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: RemovePostRequest) -> PostRef:
        """Mark the post deleted and decrement its thread's post counter.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.remove(PostId(request.post))
        return PostRef(post=post.id)


class RestorePostUseCase(BaseUseCase):
    """Use case for undoing a post soft-delete."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: RemovePostRequest) -> PostRef:
        """Clear the deleted flag and increment the thread's post counter.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.restore(PostId(request.post))
        return PostRef(post=post.id)
