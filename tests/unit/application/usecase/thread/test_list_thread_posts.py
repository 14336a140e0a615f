"""Unit tests for ListThreadPostsUseCase."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from forum.application.usecase.common import MAX_LIMIT
from forum.application.usecase.thread import (
    ListThreadPostsRequest,
    ListThreadPostsUseCase,
)
from forum.domain.service import PostService, ThreadService
from forum.domain.value import PostSort
from tests.conftest import make_post, make_thread
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListThreadPostsRequest:
    """Tests for request normalization."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (None, None),
            ("", None),
            ("2", 2),
            (" 3 ", 3),
            (4, 4),
            ("abc", 0),
            ("-1", 0),
            (-5, 0),
            ("1.5", 0),
            ("99999999999999999999", MAX_LIMIT),
            (2**70, MAX_LIMIT),
        ],
    )
    def test_limit_coercion(self, raw, expected):
        """Blank limits mean no cap, malformed or negative ones mean 0."""
        request = ListThreadPostsRequest(thread=1, limit=raw)

        assert request.limit == expected

    def test_blank_since_is_ignored(self):
        """An empty since parameter does not filter."""
        request = ListThreadPostsRequest(thread=1, since="")

        assert request.since is None

    def test_since_accepts_wire_format(self):
        """Dates use a space between date and time."""
        request = ListThreadPostsRequest(thread=1, since="2014-01-01 00:00:05")

        assert request.since.second == 5

    def test_aware_since_becomes_naive_utc(self):
        """Offsets are folded into a naive UTC datetime."""
        request = ListThreadPostsRequest(thread=1, since="2014-01-01T03:00:00+03:00")

        assert request.since == datetime(2014, 1, 1, 0, 0, 0)
        assert request.since.tzinfo is None

    def test_unknown_sort_rejected(self):
        """Only flat, tree and parent_tree are valid sorts."""
        with pytest.raises(ValidationError):
            ListThreadPostsRequest(thread=1, sort="nested")


class TestListThreadPostsUseCase:
    """Tests for ListThreadPostsUseCase."""

    @pytest.mark.asyncio
    async def test_parent_tree_with_string_limit(self, unit_env):
        """A string limit selects that many root trees."""
        # Arrange
        use_case = await unit_env.get(ListThreadPostsUseCase)
        post_service = await unit_env.get(PostService)
        thread = await (await unit_env.get(ThreadService)).create_thread(
            make_thread()
        )
        first = await post_service.create_post(make_post(thread.id))
        reply = await post_service.create_post(make_post(thread.id, parent=first.id))
        second = await post_service.create_post(make_post(thread.id))

        # Act
        response = await use_case.execute(
            ListThreadPostsRequest(
                thread=thread.id, sort=PostSort.PARENT_TREE, order="asc", limit="1"
            )
        )

        # Assert
        assert [p.id for p in response.posts] == [first.id, reply.id]
        assert second.id not in [p.id for p in response.posts]

    @pytest.mark.asyncio
    async def test_parent_tree_without_limit_is_empty(self, unit_env):
        """parent_tree with no limit selects no trees."""
        # Arrange
        use_case = await unit_env.get(ListThreadPostsUseCase)
        post_service = await unit_env.get(PostService)
        thread = await (await unit_env.get(ThreadService)).create_thread(
            make_thread()
        )
        await post_service.create_post(make_post(thread.id))

        # Act
        response = await use_case.execute(
            ListThreadPostsRequest(thread=thread.id, sort="parent_tree")
        )

        # Assert
        assert response.posts == []

    @pytest.mark.asyncio
    async def test_malformed_limit_returns_nothing(self, unit_env):
        """A non-numeric limit is a zero limit."""
        # Arrange
        use_case = await unit_env.get(ListThreadPostsUseCase)
        post_service = await unit_env.get(PostService)
        thread = await (await unit_env.get(ThreadService)).create_thread(
            make_thread()
        )
        await post_service.create_post(make_post(thread.id))

        # Act
        response = await use_case.execute(
            ListThreadPostsRequest(thread=thread.id, sort="tree", limit="abc")
        )

        # Assert
        assert response.posts == []
