"""Unit tests for UpsertProfileUseCase and ListProfilesUseCase."""

import pytest

from connector.application.usecase.profile import (
    ListProfilesRequest,
    ListProfilesUseCase,
    UpsertProfileRequest,
    UpsertProfileUseCase,
)
from connector.domain.error import ValidationError
from connector.domain.repository import UserRepository
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpsertProfileUseCase:
    """Tests for UpsertProfileUseCase."""

    @pytest.mark.asyncio
    async def test_skills_string_is_split_and_owner_embedded(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        owner = await user_repo.save(make_user(name="Ada"))
        use_case = await unit_env.get(UpsertProfileUseCase)

        # Act
        view = await use_case.execute(
            UpsertProfileRequest(
                user_id=str(owner.id),
                status="Developer",
                skills="python, sql ,go",
                twitter="https://twitter.com/ada",
            )
        )

        # Assert
        assert view.skills == ["python", "sql", "go"]
        assert view.user.id == str(owner.id)
        assert view.user.name == "Ada"
        assert view.social.twitter == "https://twitter.com/ada"

    @pytest.mark.asyncio
    async def test_empty_skills_are_rejected(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        owner = await user_repo.save(make_user())
        use_case = await unit_env.get(UpsertProfileUseCase)

        # Act & Assert
        with pytest.raises(ValidationError, match="Skills is required"):
            await use_case.execute(
                UpsertProfileRequest(user_id=str(owner.id), status="Dev", skills=" , ")
            )

    @pytest.mark.asyncio
    async def test_blank_status_is_rejected(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        owner = await user_repo.save(make_user())
        use_case = await unit_env.get(UpsertProfileUseCase)

        # Act & Assert
        with pytest.raises(ValidationError, match="Status is required"):
            await use_case.execute(
                UpsertProfileRequest(user_id=str(owner.id), status="  ", skills="python")
            )


class TestListProfilesUseCase:
    """Tests for ListProfilesUseCase."""

    @pytest.mark.asyncio
    async def test_lists_every_profile_with_owner(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        upsert = await unit_env.get(UpsertProfileUseCase)
        list_profiles = await unit_env.get(ListProfilesUseCase)
        for name in ("Ada", "Grace"):
            owner = await user_repo.save(make_user(name=name))
            await upsert.execute(
                UpsertProfileRequest(
                    user_id=str(owner.id), status="Developer", skills="python"
                )
            )

        # Act
        response = await list_profiles.execute(ListProfilesRequest())

        # Assert
        assert sorted(p.user.name for p in response.profiles) == ["Ada", "Grace"]
