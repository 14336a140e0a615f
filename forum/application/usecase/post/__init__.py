"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .remove_post import RemovePostRequest, RemovePostUseCase, RestorePostUseCase
from .update_post import UpdatePostRequest, UpdatePostUseCase
from .vote_post import VotePostRequest, VotePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "RemovePostRequest",
    "RemovePostUseCase",
    "RestorePostUseCase",
    "UpdatePostRequest",
    "UpdatePostUseCase",
    "VotePostRequest",
    "VotePostUseCase",
]
