"""Enumerations used by post and thread listings."""

from enum import Enum


class SortOrder(str, Enum):
    """Direction of a listing."""

    ASC = "asc"
    DESC = "desc"


class PostSort(str, Enum):
    """Post listing mode within a thread."""

    FLAT = "flat"  # By date
    TREE = "tree"  # By (first_path, last_path)
    PARENT_TREE = "parent_tree"  # Like TREE, limit counts root trees


class Vote(int, Enum):
    """Direction of a vote on a post."""

    LIKE = 1
    DISLIKE = -1

    @classmethod
    def from_value(cls, value: int) -> "Vote | None":
        """Map a raw vote to its direction (0 means no vote)."""
        if value > 0:
            return cls.LIKE
        if value < 0:
            return cls.DISLIKE
        return None
