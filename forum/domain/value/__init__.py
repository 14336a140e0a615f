"""Domain value objects for the forum."""

from forum.domain.value.identifiers import PostId, ThreadId
from forum.domain.value.path import PostPath, encode_segment
from forum.domain.value.types import PostSort, SortOrder, Vote

__all__ = [
    # Identifiers
    "PostId",
    "ThreadId",
    # Materialized path
    "PostPath",
    "encode_segment",
    # Types
    "PostSort",
    "SortOrder",
    "Vote",
]
