"""Unit tests for DeleteAccountUseCase."""

import pytest

from connector.application.usecase.profile import (
    DeleteAccountRequest,
    DeleteAccountUseCase,
)
from connector.domain.error import NotFoundError
from connector.domain.model import ProfileDetails
from connector.domain.repository import PostRepository, ProfileRepository, UserRepository
from connector.domain.service import PostService, ProfileService
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeleteAccountUseCase:
    """Tests for DeleteAccountUseCase."""

    @pytest.mark.asyncio
    async def test_removes_posts_profile_and_user(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        profile_repo = await unit_env.get(ProfileRepository)
        post_service = await unit_env.get(PostService)
        profile_service = await unit_env.get(ProfileService)
        use_case = await unit_env.get(DeleteAccountUseCase)

        doomed = await user_repo.save(make_user(name="Ada"))
        survivor = await user_repo.save(make_user(name="Grace"))
        await post_service.create_post(doomed, "one")
        await post_service.create_post(doomed, "two")
        kept = await post_service.create_post(survivor, "three")
        await profile_service.upsert_profile(
            doomed.id, ProfileDetails(status="Developer", skills=["python"])
        )

        # Act
        response = await use_case.execute(DeleteAccountRequest(user_id=str(doomed.id)))

        # Assert
        assert response.posts_deleted == 2
        assert response.profile_deleted is True
        assert await user_repo.find_by_id(doomed.id) is None
        assert await profile_repo.find_by_user(doomed.id) is None
        assert [p.id for p in await post_repo.find_all()] == [kept.id]
        assert await user_repo.find_by_id(survivor.id) is not None

    @pytest.mark.asyncio
    async def test_account_without_profile_is_deleted(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(DeleteAccountUseCase)
        user = await user_repo.save(make_user())

        # Act
        response = await use_case.execute(DeleteAccountRequest(user_id=str(user.id)))

        # Assert
        assert response.posts_deleted == 0
        assert response.profile_deleted is False

    @pytest.mark.asyncio
    async def test_deleting_twice_reports_not_found(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(DeleteAccountUseCase)
        user = await user_repo.save(make_user())
        await use_case.execute(DeleteAccountRequest(user_id=str(user.id)))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(DeleteAccountRequest(user_id=str(user.id)))

    @pytest.mark.asyncio
    async def test_failed_user_step_keeps_posts_and_profile(self, unit_env):
        """Posts and profile survive when the identity itself cannot be deleted."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        profile_repo = await unit_env.get(ProfileRepository)
        post_service = await unit_env.get(PostService)
        profile_service = await unit_env.get(ProfileService)
        use_case = await unit_env.get(DeleteAccountUseCase)

        # Never saved, so the final step finds no identity to delete
        ghost = make_user()
        post = await post_service.create_post(ghost, "orphan")
        await profile_service.upsert_profile(
            ghost.id, ProfileDetails(status="Developer", skills=["python"])
        )

        # Act
        with pytest.raises(NotFoundError):
            await use_case.execute(DeleteAccountRequest(user_id=str(ghost.id)))

        # Assert
        assert await post_repo.find_by_id(post.id) is not None
        assert await profile_repo.find_by_user(ghost.id) is not None
