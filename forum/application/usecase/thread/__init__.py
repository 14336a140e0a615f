"""Thread use cases."""

from .close_thread import CloseThreadRequest, CloseThreadUseCase, OpenThreadUseCase
from .create_thread import CreateThreadRequest, CreateThreadUseCase
from .get_thread import GetThreadRequest, GetThreadUseCase
from .list_thread_posts import (
    ListThreadPostsRequest,
    ListThreadPostsResponse,
    ListThreadPostsUseCase,
)
from .list_threads import ListThreadsRequest, ListThreadsResponse, ListThreadsUseCase
from .remove_thread import (
    RemoveThreadRequest,
    RemoveThreadUseCase,
    RestoreThreadUseCase,
)
from .update_thread import UpdateThreadRequest, UpdateThreadUseCase
from .vote_thread import VoteThreadRequest, VoteThreadUseCase

__all__ = [
    "CloseThreadRequest",
    "CloseThreadUseCase",
    "CreateThreadRequest",
    "CreateThreadUseCase",
    "GetThreadRequest",
    "GetThreadUseCase",
    "ListThreadPostsRequest",
    "ListThreadPostsResponse",
    "ListThreadPostsUseCase",
    "ListThreadsRequest",
    "ListThreadsResponse",
    "ListThreadsUseCase",
    "OpenThreadUseCase",
    "RemoveThreadRequest",
    "RemoveThreadUseCase",
    "RestoreThreadUseCase",
    "UpdateThreadRequest",
    "UpdateThreadUseCase",
    "VoteThreadRequest",
    "VoteThreadUseCase",
]
