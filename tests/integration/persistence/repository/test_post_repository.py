"""Integration tests for the PostgreSQL post and user repositories.

Run against a migrated database:
    DATABASE__URL=postgresql+asyncpg://... alembic upgrade head
    RUN_INTEGRATION=1 pytest tests/integration
"""

import os
from uuid import uuid4

import pytest

from connector.domain.model import Like, Post
from connector.domain.repository import PostRepository, UserRepository
from connector.domain.value import PostId
from tests.conftest import make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("RUN_INTEGRATION"),
    reason="needs a migrated PostgreSQL database (set RUN_INTEGRATION=1)",
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


class TestPostgresPostRepository:
    """Tests for PostgresPostRepository."""

    @pytest.mark.asyncio
    async def test_save_and_load_with_nested_likes(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        author = await user_repo.save(make_user())
        post = Post(
            id=PostId(uuid4()),
            author_id=author.id,
            name=author.name,
            avatar=author.avatar,
            text="Hello",
            likes=[Like(user_id=author.id)],
        )

        # Act
        await post_repo.save(post)
        loaded = await post_repo.find_by_id(post.id, for_update=True)

        # Assert
        assert loaded is not None
        assert loaded.likes == [Like(user_id=author.id)]
        assert await post_repo.count_by_author(author.id) == 1

    @pytest.mark.asyncio
    async def test_delete_by_author(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        author = await user_repo.save(make_user())
        for text in ("one", "two"):
            await post_repo.save(
                Post(id=PostId(uuid4()), author_id=author.id, name=author.name, text=text)
            )

        # Act
        deleted = await post_repo.delete_by_author(author.id)

        # Assert
        assert deleted == 2
        assert await post_repo.count_by_author(author.id) == 0
        assert await user_repo.delete(author.id) is True
