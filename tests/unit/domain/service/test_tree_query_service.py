"""Unit tests for TreeQueryService and root-limited scanning."""

import pytest

from forum.domain.model import Post
from forum.domain.service import (
    PostService,
    ThreadService,
    TreeQueryService,
    take_root_trees,
)
from forum.domain.value import PostSort, SortOrder, ThreadId
from tests.conftest import BASE_DATE, make_post, make_thread
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _post(post_id: int, first_path: int, last_path: str = "") -> Post:
    return Post(
        id=post_id,
        thread=ThreadId(1),
        forum="forum1",
        user="user1@mail.ru",
        message="m",
        date=BASE_DATE,
        first_path=first_path,
        last_path=last_path,
    )


async def _build_forest(unit_env) -> tuple[ThreadId, dict[str, int]]:
    """Create three reply trees in one thread.

    Tree sizes are 2, 3 and 1::

        1            (minute 0)
          2          (minute 5)
        3            (minute 1)
          4          (minute 3)
            6        (minute 6)
        5            (minute 2)
    """
    thread_service = await unit_env.get(ThreadService)
    post_service = await unit_env.get(PostService)
    thread = await thread_service.create_thread(make_thread())

    ids = {}
    ids["a"] = (await post_service.create_post(make_post(thread.id, minutes=0))).id
    ids["a1"] = (
        await post_service.create_post(make_post(thread.id, ids["a"], minutes=5))
    ).id
    ids["b"] = (await post_service.create_post(make_post(thread.id, minutes=1))).id
    ids["b1"] = (
        await post_service.create_post(make_post(thread.id, ids["b"], minutes=3))
    ).id
    ids["c"] = (await post_service.create_post(make_post(thread.id, minutes=2))).id
    ids["b1a"] = (
        await post_service.create_post(make_post(thread.id, ids["b1"], minutes=6))
    ).id
    return thread.id, ids


class TestTakeRootTrees:
    """Tests for the root-limited scan."""

    def test_keeps_whole_trees(self):
        """Limit counts root trees, not rows."""
        posts = [
            _post(1, 1),
            _post(2, 1, ".002"),
            _post(3, 3),
            _post(4, 3, ".004"),
            _post(6, 3, ".004.006"),
            _post(5, 5),
        ]

        result = take_root_trees(posts, 2)

        assert [p.id for p in result] == [1, 2, 3, 4, 6]

    def test_zero_limit_is_empty(self):
        """No root tree is selected with a zero limit."""
        assert take_root_trees([_post(1, 1), _post(2, 1, ".002")], 0) == []

    def test_limit_above_tree_count_returns_everything(self):
        """Asking for more trees than exist returns all rows."""
        posts = [_post(1, 1), _post(2, 2)]

        assert take_root_trees(posts, 10) == posts

    def test_empty_input(self):
        """Nothing in, nothing out."""
        assert take_root_trees([], 3) == []


class TestListPosts:
    """Tests for list_posts dispatch and ordering."""

    @pytest.mark.asyncio
    async def test_tree_ascending(self, unit_env):
        """Tree order is depth-first with roots ascending."""
        tree_query_service = await unit_env.get(TreeQueryService)
        thread_id, ids = await _build_forest(unit_env)

        posts = await tree_query_service.list_posts(
            thread_id, sort=PostSort.TREE, order=SortOrder.ASC
        )

        assert [p.id for p in posts] == [
            ids["a"], ids["a1"], ids["b"], ids["b1"], ids["b1a"], ids["c"]
        ]

    @pytest.mark.asyncio
    async def test_tree_descending_flips_roots_only(self, unit_env):
        """Descending order reverses the roots but keeps each tree depth-first."""
        tree_query_service = await unit_env.get(TreeQueryService)
        thread_id, ids = await _build_forest(unit_env)

        posts = await tree_query_service.list_posts(
            thread_id, sort=PostSort.TREE, order=SortOrder.DESC
        )

        assert [p.id for p in posts] == [
            ids["c"], ids["b"], ids["b1"], ids["b1a"], ids["a"], ids["a1"]
        ]

    @pytest.mark.asyncio
    async def test_tree_limit_caps_rows(self, unit_env):
        """In tree mode the limit counts rows and may cut a tree."""
        tree_query_service = await unit_env.get(TreeQueryService)
        thread_id, ids = await _build_forest(unit_env)

        posts = await tree_query_service.list_posts(
            thread_id, sort=PostSort.TREE, order=SortOrder.ASC, limit=3
        )

        assert [p.id for p in posts] == [ids["a"], ids["a1"], ids["b"]]

    @pytest.mark.asyncio
    async def test_parent_tree_limits_root_trees(self, unit_env):
        """Two root trees of sizes 2 and 3 give five posts."""
        tree_query_service = await unit_env.get(TreeQueryService)
        thread_id, ids = await _build_forest(unit_env)

        posts = await tree_query_service.list_posts(
            thread_id, sort=PostSort.PARENT_TREE, limit=2
        )

        assert [p.id for p in posts] == [
            ids["a"], ids["a1"], ids["b"], ids["b1"], ids["b1a"]
        ]

    @pytest.mark.asyncio
    async def test_parent_tree_ignores_order(self, unit_env):
        """Root trees are always taken in ascending order."""
        tree_query_service = await unit_env.get(TreeQueryService)
        thread_id, ids = await _build_forest(unit_env)

        posts = await tree_query_service.list_posts(
            thread_id, sort=PostSort.PARENT_TREE, order=SortOrder.DESC, limit=1
        )

        assert [p.id for p in posts] == [ids["a"], ids["a1"]]

    @pytest.mark.asyncio
    async def test_parent_tree_without_limit_is_empty(self, unit_env):
        """A missing limit selects no root tree."""
        tree_query_service = await unit_env.get(TreeQueryService)
        thread_id, _ = await _build_forest(unit_env)

        posts = await tree_query_service.list_posts(
            thread_id, sort=PostSort.PARENT_TREE
        )

        assert posts == []

    @pytest.mark.asyncio
    async def test_flat_orders_by_date(self, unit_env):
        """Flat listing ignores the hierarchy."""
        tree_query_service = await unit_env.get(TreeQueryService)
        thread_id, ids = await _build_forest(unit_env)

        posts = await tree_query_service.list_posts(
            thread_id, sort=PostSort.FLAT, order=SortOrder.ASC
        )

        assert [p.id for p in posts] == [
            ids["a"], ids["b"], ids["c"], ids["b1"], ids["a1"], ids["b1a"]
        ]

    @pytest.mark.asyncio
    async def test_flat_descending_with_limit(self, unit_env):
        """Flat listing honours direction and row cap."""
        tree_query_service = await unit_env.get(TreeQueryService)
        thread_id, ids = await _build_forest(unit_env)

        posts = await tree_query_service.list_posts(
            thread_id, sort=PostSort.FLAT, order=SortOrder.DESC, limit=2
        )

        assert [p.id for p in posts] == [ids["b1a"], ids["a1"]]

    @pytest.mark.asyncio
    async def test_since_filters_by_date(self, unit_env):
        """Only posts dated at or after ``since`` are listed."""
        tree_query_service = await unit_env.get(TreeQueryService)
        thread_id, ids = await _build_forest(unit_env)

        posts = await tree_query_service.list_flat(
            thread_id,
            since=BASE_DATE.replace(minute=3),
            order=SortOrder.ASC,
        )

        assert [p.id for p in posts] == [ids["b1"], ids["a1"], ids["b1a"]]

    @pytest.mark.asyncio
    async def test_zero_limit_is_empty(self, unit_env):
        """A zero limit returns nothing in every mode."""
        tree_query_service = await unit_env.get(TreeQueryService)
        thread_id, _ = await _build_forest(unit_env)

        for sort in PostSort:
            assert await tree_query_service.list_posts(
                thread_id, sort=sort, limit=0
            ) == []

    @pytest.mark.asyncio
    async def test_other_threads_are_excluded(self, unit_env):
        """Listings are scoped to one thread."""
        tree_query_service = await unit_env.get(TreeQueryService)
        thread_id, _ = await _build_forest(unit_env)

        posts = await tree_query_service.list_posts(
            ThreadId(thread_id + 1), sort=PostSort.TREE
        )

        assert posts == []
