"""Post routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from forum.application.usecase.common import PostItem, PostRef
from forum.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    RemovePostRequest,
    RemovePostUseCase,
    RestorePostUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
    VotePostRequest,
    VotePostUseCase,
)
from forum.domain.value import SortOrder
from forum.interface.api.schema import Envelope

router = APIRouter(prefix="/db/api/post", tags=["posts"], route_class=DishkaRoute)


@router.post("/create/", response_model=Envelope[PostItem])
async def create_post(
    request: CreatePostRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> Envelope[PostItem]:
    """Create a post, or a reply when ``parent`` is set.

    The response carries the post's materialized path
    (``first_path``/``last_path``).
    """
    return Envelope(response=await create_post_use_case.execute(request))


@router.get("/details/", response_model=Envelope[PostItem])
async def post_details(
    post: int,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> Envelope[PostItem]:
    """Get a single post."""
    result = await get_post_use_case.execute(GetPostRequest(post=post))
    return Envelope(response=result)


@router.get("/list/", response_model=Envelope[list[PostItem]])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    forum: Optional[str] = None,
    thread: Optional[int] = None,
    since: Optional[str] = None,
    order: SortOrder = SortOrder.DESC,
    limit: Optional[str] = None,
) -> Envelope[list[PostItem]]:
    """List the posts of a forum or of a thread by date."""
    request = ListPostsRequest(
        forum=forum, thread=thread, since=since, order=order, limit=limit
    )
    result = await list_posts_use_case.execute(request)
    return Envelope(response=result.posts)


@router.post("/update/", response_model=Envelope[PostItem])
async def update_post(
    request: UpdatePostRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> Envelope[PostItem]:
    """Replace a post's message."""
    return Envelope(response=await update_post_use_case.execute(request))


@router.post("/vote/", response_model=Envelope[PostItem])
async def vote_post(
    request: VotePostRequest,
    vote_post_use_case: FromDishka[VotePostUseCase],
) -> Envelope[PostItem]:
    """Like (positive vote) or dislike (negative vote) a post."""
    return Envelope(response=await vote_post_use_case.execute(request))


@router.post("/remove/", response_model=Envelope[PostRef])
async def remove_post(
    request: RemovePostRequest,
    remove_post_use_case: FromDishka[RemovePostUseCase],
) -> Envelope[PostRef]:
    """Soft-delete a post."""
    return Envelope(response=await remove_post_use_case.execute(request))


@router.post("/restore/", response_model=Envelope[PostRef])
async def restore_post(
    request: RemovePostRequest,
    restore_post_use_case: FromDishka[RestorePostUseCase],
) -> Envelope[PostRef]:
    """Restore a removed post."""
    return Envelope(response=await restore_post_use_case.execute(request))
