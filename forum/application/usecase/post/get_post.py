"""Get post use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.application.usecase.common import PostItem
from forum.domain.service import PostService
from forum.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post: int


class GetPostUseCase(BaseUseCase):
    """Use case for reading a single post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostItem:
        """Return the post, deleted or not.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post(PostId(request.post))
        return PostItem.from_post(post)
