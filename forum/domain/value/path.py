"""Materialized path for post reply trees.

Every post carries a pair ``(first_path, last_path)``:

- ``first_path`` is the id of the top-level post the reply tree hangs from
  (the post's own id when it is top-level).
- ``last_path`` lists the encoded ids from the root's child down to the post,
  each prefixed with ``"."``. It is empty for top-level posts.

Sorting by ``(first_path, last_path)`` yields depth-first order with siblings
in id order, as long as all segments have the same width::

    post 1 (root)            first_path=1  last_path=""
      post 2 (reply to 1)    first_path=1  last_path=".002"
        post 4 (reply to 2)  first_path=1  last_path=".002.004"
      post 3 (reply to 1)    first_path=1  last_path=".003"

Segments are padded, never truncated: ``encode_segment(1234) == "1234"``.
Once ids outgrow the width, ``"1000" < "999"`` and sibling order breaks,
so the width must be fixed large enough for the lifetime of the data.
"""

from pydantic import Field

from forum.domain.value.common import ValueObject

SEGMENT_SEPARATOR = "."
DEFAULT_SEGMENT_WIDTH = 3


def encode_segment(value: int, width: int = DEFAULT_SEGMENT_WIDTH) -> str:
    """Encode a post id as a zero-padded path segment.

    Args:
        value: Positive post id
        width: Minimum number of digits

    Returns:
        Decimal digits of ``value`` left-padded with zeros to ``width``
    """
    return str(value).zfill(width)


class PostPath(ValueObject):
    """Position of a post inside its thread's reply forest."""

    first_path: int = Field(ge=1)
    last_path: str = ""

    @property
    def is_root(self) -> bool:
        """True for top-level posts."""
        return self.last_path == ""

    @property
    def depth(self) -> int:
        """Number of replies between the root and this post (0 for roots)."""
        return self.last_path.count(SEGMENT_SEPARATOR)

    @classmethod
    def root(cls, post_id: int) -> "PostPath":
        """Path of a top-level post."""
        return cls(first_path=post_id, last_path="")

    def child(self, post_id: int, width: int = DEFAULT_SEGMENT_WIDTH) -> "PostPath":
        """Path of a direct reply to the post at this path.

        Args:
            post_id: Id already assigned to the reply
            width: Minimum segment width

        Returns:
            Path sharing this tree's ``first_path`` with one more segment
        """
        return PostPath(
            first_path=self.first_path,
            last_path=f"{self.last_path}{SEGMENT_SEPARATOR}"
            f"{encode_segment(post_id, width)}",
        )
