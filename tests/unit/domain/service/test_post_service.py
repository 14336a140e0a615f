"""Unit tests for PostService."""

import pytest

from forum.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    ParentNotFoundError,
)
from forum.domain.repository import PostRepository, ThreadRepository
from forum.domain.service import PostService, ThreadService
from forum.domain.value import PostId, SortOrder
from tests.conftest import make_post, make_thread
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_create_root_post(self, unit_env):
        """A top-level post gets an id, a root path and bumps the counter."""
        # Arrange
        post_service = await unit_env.get(PostService)
        thread_service = await unit_env.get(ThreadService)
        thread = await thread_service.create_thread(make_thread())

        # Act
        post = await post_service.create_post(make_post(thread.id))

        # Assert
        assert post.id == 1
        assert post.first_path == post.id
        assert post.last_path == ""
        assert post.parent is None
        assert (await thread_service.get_thread(thread.id)).posts == 1

    @pytest.mark.asyncio
    async def test_create_reply_stores_path(self, unit_env):
        """Replies are returned and stored with their materialized path."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        thread = await (await unit_env.get(ThreadService)).create_thread(
            make_thread()
        )
        root = await post_service.create_post(make_post(thread.id))

        # Act
        reply = await post_service.create_post(make_post(thread.id, parent=root.id))

        # Assert
        assert reply.first_path == root.id
        assert reply.last_path == f".{reply.id:03d}"
        stored = await post_repo.find_by_id(reply.id)
        assert stored.first_path == reply.first_path
        assert stored.last_path == reply.last_path

    @pytest.mark.asyncio
    async def test_unknown_thread(self, unit_env):
        """Posting into a missing thread fails before anything is stored."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await post_service.create_post(make_post(42))
        assert await post_repo.count() == 0

    @pytest.mark.asyncio
    async def test_unknown_parent(self, unit_env):
        """Replying to a missing post raises ParentNotFoundError."""
        # Arrange
        post_service = await unit_env.get(PostService)
        thread_service = await unit_env.get(ThreadService)
        thread = await thread_service.create_thread(make_thread())

        # Act & Assert
        with pytest.raises(ParentNotFoundError):
            await post_service.create_post(make_post(thread.id, parent=7))
        assert (await thread_service.get_thread(thread.id)).posts == 0

    @pytest.mark.asyncio
    async def test_parent_in_other_thread(self, unit_env):
        """A reply must stay in its parent's thread."""
        # Arrange
        post_service = await unit_env.get(PostService)
        thread_service = await unit_env.get(ThreadService)
        first = await thread_service.create_thread(make_thread(slug="first"))
        second = await thread_service.create_thread(make_thread(slug="second"))
        root = await post_service.create_post(make_post(first.id))

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError):
            await post_service.create_post(make_post(second.id, parent=root.id))


class TestRemoveRestore:
    """Tests for remove and restore."""

    @pytest.mark.asyncio
    async def test_remove_and_restore_adjust_counter(self, unit_env):
        """Removing decrements the thread counter, restoring increments it."""
        # Arrange
        post_service = await unit_env.get(PostService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.add(make_thread())
        post = await post_service.create_post(make_post(thread.id))
        await post_service.create_post(make_post(thread.id))

        # Act & Assert
        removed = await post_service.remove(post.id)
        assert removed.is_deleted
        assert (await thread_repo.find_by_id(thread.id)).posts == 1

        restored = await post_service.restore(post.id)
        assert not restored.is_deleted
        assert (await thread_repo.find_by_id(thread.id)).posts == 2

    @pytest.mark.asyncio
    async def test_repeated_remove_is_noop(self, unit_env):
        """Removing a removed post leaves the counter alone."""
        # Arrange
        post_service = await unit_env.get(PostService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.add(make_thread())
        post = await post_service.create_post(make_post(thread.id))

        # Act
        await post_service.remove(post.id)
        await post_service.remove(post.id)

        # Assert
        assert (await thread_repo.find_by_id(thread.id)).posts == 0

    @pytest.mark.asyncio
    async def test_restore_live_post_is_noop(self, unit_env):
        """Restoring a post that was never removed changes nothing."""
        # Arrange
        post_service = await unit_env.get(PostService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.add(make_thread())
        post = await post_service.create_post(make_post(thread.id))

        # Act
        await post_service.restore(post.id)

        # Assert
        assert (await thread_repo.find_by_id(thread.id)).posts == 1

    @pytest.mark.asyncio
    async def test_remove_unknown_post(self, unit_env):
        """Removing a missing post raises NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.remove(PostId(5))


class TestVote:
    """Tests for vote."""

    @pytest.mark.asyncio
    async def test_like_and_dislike(self, unit_env):
        """Positive votes like, negative votes dislike."""
        # Arrange
        post_service = await unit_env.get(PostService)
        thread = await (await unit_env.get(ThreadRepository)).add(make_thread())
        post = await post_service.create_post(make_post(thread.id))

        # Act
        await post_service.vote(post.id, 1)
        await post_service.vote(post.id, 5)
        voted = await post_service.vote(post.id, -1)

        # Assert
        assert voted.likes == 2
        assert voted.dislikes == 1
        assert voted.points == 1

    @pytest.mark.asyncio
    async def test_zero_vote_changes_nothing(self, unit_env):
        """A zero vote is neither a like nor a dislike."""
        # Arrange
        post_service = await unit_env.get(PostService)
        thread = await (await unit_env.get(ThreadRepository)).add(make_thread())
        post = await post_service.create_post(make_post(thread.id))

        # Act
        voted = await post_service.vote(post.id, 0)

        # Assert
        assert (voted.likes, voted.dislikes, voted.points) == (0, 0, 0)

    @pytest.mark.asyncio
    async def test_vote_unknown_post(self, unit_env):
        """Voting on a missing post raises NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.vote(PostId(3), 1)


class TestUpdateAndList:
    """Tests for update_message and list_by_forum."""

    @pytest.mark.asyncio
    async def test_update_message_marks_edited(self, unit_env):
        """Editing a post replaces its message and sets is_edited."""
        # Arrange
        post_service = await unit_env.get(PostService)
        thread = await (await unit_env.get(ThreadRepository)).add(make_thread())
        post = await post_service.create_post(make_post(thread.id))

        # Act
        updated = await post_service.update_message(post.id, "New text")

        # Assert
        assert updated.message == "New text"
        assert updated.is_edited
        assert updated.first_path == post.first_path

    @pytest.mark.asyncio
    async def test_update_unknown_post(self, unit_env):
        """Editing a missing post raises NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.update_message(PostId(1), "text")

    @pytest.mark.asyncio
    async def test_list_by_forum(self, unit_env):
        """Forum listings span threads and are ordered by date."""
        # Arrange
        post_service = await unit_env.get(PostService)
        thread_repo = await unit_env.get(ThreadRepository)
        first = await thread_repo.add(make_thread())
        second = await thread_repo.add(make_thread())
        early = await post_service.create_post(make_post(first.id, minutes=1))
        late = await post_service.create_post(make_post(second.id, minutes=9))
        await post_service.create_post(make_post(second.id, forum="other"))

        # Act
        posts = await post_service.list_by_forum("forum1", order=SortOrder.ASC)

        # Assert
        assert [p.id for p in posts] == [early.id, late.id]
