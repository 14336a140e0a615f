"""Update post use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.application.usecase.common import PostItem
from forum.domain.service import PostService
from forum.domain.value import PostId


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post: int
    message: str


class UpdatePostUseCase(BaseUseCase):
    """Use case for editing a post's message."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> PostItem:
        """Replace the message and mark the post edited.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.update_message(
            PostId(request.post), request.message
        )
        return PostItem.from_post(post)
