"""Vote on post use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.application.usecase.common import PostItem
from forum.domain.service import PostService
from forum.domain.value import PostId


class VotePostRequest(BaseModel):
    """Vote request: positive likes, negative dislikes."""

    post: int
    vote: int


class VotePostUseCase(BaseUseCase):
    """Use case for liking or disliking a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: VotePostRequest) -> PostItem:
        post = await self.post_service.vote(PostId(request.post), request.vote)
        return PostItem.from_post(post)
