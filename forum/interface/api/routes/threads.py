"""Thread routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from forum.application.usecase.common import PostItem, ThreadItem, ThreadRef
from forum.application.usecase.thread import (
    CloseThreadRequest,
    CloseThreadUseCase,
    CreateThreadRequest,
    CreateThreadUseCase,
    GetThreadRequest,
    GetThreadUseCase,
    ListThreadPostsRequest,
    ListThreadPostsUseCase,
    ListThreadsRequest,
    ListThreadsUseCase,
    OpenThreadUseCase,
    RemoveThreadRequest,
    RemoveThreadUseCase,
    RestoreThreadUseCase,
    UpdateThreadRequest,
    UpdateThreadUseCase,
    VoteThreadRequest,
    VoteThreadUseCase,
)
from forum.domain.value import PostSort, SortOrder
from forum.interface.api.schema import Envelope

router = APIRouter(prefix="/db/api/thread", tags=["threads"], route_class=DishkaRoute)


@router.post("/create/", response_model=Envelope[ThreadItem])
async def create_thread(
    request: CreateThreadRequest,
    create_thread_use_case: FromDishka[CreateThreadUseCase],
) -> Envelope[ThreadItem]:
    """Open a new thread."""
    return Envelope(response=await create_thread_use_case.execute(request))


@router.get("/details/", response_model=Envelope[ThreadItem])
async def thread_details(
    thread: int,
    get_thread_use_case: FromDishka[GetThreadUseCase],
) -> Envelope[ThreadItem]:
    """Get a thread with its vote and post counters."""
    result = await get_thread_use_case.execute(GetThreadRequest(thread=thread))
    return Envelope(response=result)


@router.get("/list/", response_model=Envelope[list[ThreadItem]])
async def list_threads(
    list_threads_use_case: FromDishka[ListThreadsUseCase],
    forum: Optional[str] = None,
    user: Optional[str] = None,
    since: Optional[str] = None,
    order: SortOrder = SortOrder.DESC,
    limit: Optional[str] = None,
) -> Envelope[list[ThreadItem]]:
    """List threads of a forum, or of a user, by date."""
    request = ListThreadsRequest(
        forum=forum, user=user, since=since, order=order, limit=limit
    )
    result = await list_threads_use_case.execute(request)
    return Envelope(response=result.threads)


@router.get("/listPosts/", response_model=Envelope[list[PostItem]])
async def list_thread_posts(
    thread: int,
    list_thread_posts_use_case: FromDishka[ListThreadPostsUseCase],
    since: Optional[str] = None,
    order: SortOrder = SortOrder.DESC,
    sort: PostSort = PostSort.FLAT,
    limit: Optional[str] = None,
) -> Envelope[list[PostItem]]:
    """List a thread's posts.

    ``sort`` selects the ordering:

    - ``flat``: by date
    - ``tree``: by reply tree, ``order`` flips the order of root posts only
    - ``parent_tree``: whole reply trees of the first ``limit`` root posts

    ``limit`` is taken as text so that malformed values read as 0 instead
    of failing the request.
    """
    request = ListThreadPostsRequest(
        thread=thread, since=since, order=order, sort=sort, limit=limit
    )
    result = await list_thread_posts_use_case.execute(request)
    return Envelope(response=result.posts)


@router.post("/update/", response_model=Envelope[ThreadItem])
async def update_thread(
    request: UpdateThreadRequest,
    update_thread_use_case: FromDishka[UpdateThreadUseCase],
) -> Envelope[ThreadItem]:
    """Replace a thread's message and slug."""
    return Envelope(response=await update_thread_use_case.execute(request))


@router.post("/close/", response_model=Envelope[ThreadRef])
async def close_thread(
    request: CloseThreadRequest,
    close_thread_use_case: FromDishka[CloseThreadUseCase],
) -> Envelope[ThreadRef]:
    """Close a thread."""
    return Envelope(response=await close_thread_use_case.execute(request))


@router.post("/open/", response_model=Envelope[ThreadRef])
async def open_thread(
    request: CloseThreadRequest,
    open_thread_use_case: FromDishka[OpenThreadUseCase],
) -> Envelope[ThreadRef]:
    """Reopen a closed thread."""
    return Envelope(response=await open_thread_use_case.execute(request))


@router.post("/vote/", response_model=Envelope[ThreadItem])
async def vote_thread(
    request: VoteThreadRequest,
    vote_thread_use_case: FromDishka[VoteThreadUseCase],
) -> Envelope[ThreadItem]:
    """Like (positive vote) or dislike (negative vote) a thread."""
    return Envelope(response=await vote_thread_use_case.execute(request))


@router.post("/remove/", response_model=Envelope[ThreadRef])
async def remove_thread(
    request: RemoveThreadRequest,
    remove_thread_use_case: FromDishka[RemoveThreadUseCase],
) -> Envelope[ThreadRef]:
    """Soft-delete a thread and all of its posts."""
    return Envelope(response=await remove_thread_use_case.execute(request))


@router.post("/restore/", response_model=Envelope[ThreadRef])
async def restore_thread(
    request: RemoveThreadRequest,
    restore_thread_use_case: FromDishka[RestoreThreadUseCase],
) -> Envelope[ThreadRef]:
    """Restore a removed thread and all of its posts."""
    return Envelope(response=await restore_thread_use_case.execute(request))
