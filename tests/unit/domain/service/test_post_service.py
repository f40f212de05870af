"""Unit tests for PostService."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from connector.domain.error import (
    AlreadyLikedError,
    NotAuthorizedError,
    NotFoundError,
    NotYetLikedError,
)
from connector.domain.repository import PostRepository
from connector.domain.service import PostService
from connector.domain.value import CommentId, PostId, UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post method."""

    @pytest.mark.asyncio
    async def test_create_post_snapshots_author(self, unit_env):
        """Name and avatar are copied from the author at creation."""
        # Arrange
        post_service = await unit_env.get(PostService)
        author = make_user(name="Ada")

        # Act
        post = await post_service.create_post(author, "Hello world")

        # Assert
        assert post.author_id == author.id
        assert post.name == "Ada"
        assert post.avatar == author.avatar
        assert post.likes == []
        assert post.comments == []

    @pytest.mark.asyncio
    async def test_list_posts_newest_first(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user()
        first = await post_service.create_post(author, "first")
        second = await post_service.create_post(author, "second")
        await post_repo.save(
            first.model_copy(update={"created_at": datetime(2024, 1, 1, tzinfo=timezone.utc)})
        )
        await post_repo.save(
            second.model_copy(update={"created_at": datetime(2024, 1, 2, tzinfo=timezone.utc)})
        )

        # Act
        posts = await post_service.list_posts()

        # Assert
        assert [p.id for p in posts] == [second.id, first.id]


class TestLikes:
    """Tests for like_post and unlike_post."""

    @pytest.mark.asyncio
    async def test_like_adds_to_front(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(make_user(), "Hello")
        first_fan, second_fan = UserId(uuid4()), UserId(uuid4())

        # Act
        await post_service.like_post(first_fan, post.id)
        liked = await post_service.like_post(second_fan, post.id)

        # Assert
        assert [like.user_id for like in liked.likes] == [second_fan, first_fan]

    @pytest.mark.asyncio
    async def test_second_like_is_rejected_and_changes_nothing(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_service.create_post(make_user(), "Hello")
        fan = UserId(uuid4())
        await post_service.like_post(fan, post.id)

        # Act & Assert
        with pytest.raises(AlreadyLikedError, match="Post already liked"):
            await post_service.like_post(fan, post.id)

        saved = await post_repo.find_by_id(post.id)
        assert len(saved.likes) == 1

    @pytest.mark.asyncio
    async def test_unlike_without_like_is_rejected_and_changes_nothing(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_service.create_post(make_user(), "Hello")
        fan, stranger = UserId(uuid4()), UserId(uuid4())
        await post_service.like_post(fan, post.id)

        # Act & Assert
        with pytest.raises(NotYetLikedError, match="Post has not yet been liked"):
            await post_service.unlike_post(stranger, post.id)

        saved = await post_repo.find_by_id(post.id)
        assert [like.user_id for like in saved.likes] == [fan]

    @pytest.mark.asyncio
    async def test_unlike_removes_only_callers_like(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(make_user(), "Hello")
        fan, other = UserId(uuid4()), UserId(uuid4())
        await post_service.like_post(fan, post.id)
        await post_service.like_post(other, post.id)

        # Act
        result = await post_service.unlike_post(fan, post.id)

        # Assert
        assert [like.user_id for like in result.likes] == [other]

    @pytest.mark.asyncio
    async def test_like_missing_post_raises_not_found(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.like_post(UserId(uuid4()), PostId(uuid4()))


class TestComments:
    """Tests for add_comment and remove_comment."""

    @pytest.mark.asyncio
    async def test_add_comment_snapshots_commenter(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(make_user(name="Ada"), "Hello")
        commenter = make_user(name="Grace")

        # Act
        result = await post_service.add_comment(commenter, post.id, "Nice post")

        # Assert
        assert len(result.comments) == 1
        comment = result.comments[0]
        assert comment.author_id == commenter.id
        assert comment.name == "Grace"
        assert comment.text == "Nice post"

    @pytest.mark.asyncio
    async def test_post_author_cannot_remove_others_comment(self, unit_env):
        """Owning the post does not allow deleting comments on it."""
        # Arrange
        post_service = await unit_env.get(PostService)
        author = make_user()
        post = await post_service.create_post(author, "Hello")
        commented = await post_service.add_comment(make_user(), post.id, "Nice")
        comment_id = commented.comments[0].id

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await post_service.remove_comment(author.id, post.id, comment_id)

    @pytest.mark.asyncio
    async def test_commenter_removes_own_comment(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(make_user(), "Hello")
        commenter = make_user()
        commented = await post_service.add_comment(commenter, post.id, "Nice")

        # Act
        result = await post_service.remove_comment(
            commenter.id, post.id, commented.comments[0].id
        )

        # Assert
        assert result.comments == []

    @pytest.mark.asyncio
    async def test_remove_missing_comment_raises_not_found(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        author = make_user()
        post = await post_service.create_post(author, "Hello")

        # Act & Assert
        with pytest.raises(NotFoundError):
            await post_service.remove_comment(author.id, post.id, CommentId(uuid4()))


class TestDeletePost:
    """Tests for delete_post and delete_posts_by_author."""

    @pytest.mark.asyncio
    async def test_only_author_may_delete(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user()
        post = await post_service.create_post(author, "Hello")

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await post_service.delete_post(UserId(uuid4()), post.id)
        assert await post_repo.find_by_id(post.id) is not None

        await post_service.delete_post(author.id, post.id)
        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_delete_posts_by_author_leaves_others(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        author, other = make_user(), make_user()
        await post_service.create_post(author, "one")
        await post_service.create_post(author, "two")
        kept = await post_service.create_post(other, "three")

        # Act
        deleted = await post_service.delete_posts_by_author(author.id)

        # Assert
        assert deleted == 2
        assert [p.id for p in await post_service.list_posts()] == [kept.id]
        assert await post_service.count_posts_by_author(author.id) == 0
