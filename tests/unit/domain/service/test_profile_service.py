"""Unit tests for ProfileService."""

from datetime import date
from uuid import uuid4

import pytest

from connector.domain.error import NotFoundError
from connector.domain.model import Education, Experience, ProfileDetails, SocialLinks
from connector.domain.service import ProfileService
from connector.domain.value import EducationId, ExperienceId, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _experience(title: str = "Engineer") -> Experience:
    return Experience(
        id=ExperienceId(uuid4()),
        title=title,
        company="Analytical Engines",
        from_date=date(2020, 1, 1),
        current=True,
    )


class TestUpsertProfile:
    """Tests for upsert_profile method."""

    @pytest.mark.asyncio
    async def test_creates_profile_when_absent(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        user_id = UserId(uuid4())
        details = ProfileDetails(
            status="Developer",
            skills=["python", "sql"],
            github_username="octocat",
            social=SocialLinks(twitter="https://twitter.com/ada"),
        )

        # Act
        profile = await profile_service.upsert_profile(user_id, details)

        # Assert
        assert profile.user_id == user_id
        assert profile.skills == ["python", "sql"]
        assert profile.social.twitter == "https://twitter.com/ada"
        assert (await profile_service.get_profile(user_id)).id == profile.id

    @pytest.mark.asyncio
    async def test_update_keeps_unsupplied_fields(self, unit_env):
        """A second upsert updates in place and leaves None fields alone."""
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        user_id = UserId(uuid4())
        created = await profile_service.upsert_profile(
            user_id,
            ProfileDetails(status="Developer", skills=["python"], company="Acme"),
        )

        # Act
        updated = await profile_service.upsert_profile(
            user_id, ProfileDetails(status="Lead", skills=["python", "go"])
        )

        # Assert
        assert updated.id == created.id
        assert updated.status == "Lead"
        assert updated.skills == ["python", "go"]
        assert updated.company == "Acme"
        assert updated.updated_at >= created.updated_at
        assert len(await profile_service.list_profiles()) == 1


class TestExperience:
    """Tests for experience entries."""

    @pytest.mark.asyncio
    async def test_add_experience_prepends(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        user_id = UserId(uuid4())
        await profile_service.upsert_profile(
            user_id, ProfileDetails(status="Developer", skills=["python"])
        )
        older, newer = _experience("Intern"), _experience("Engineer")

        # Act
        await profile_service.add_experience(user_id, older)
        profile = await profile_service.add_experience(user_id, newer)

        # Assert
        assert [e.title for e in profile.experience] == ["Engineer", "Intern"]

    @pytest.mark.asyncio
    async def test_add_experience_without_profile_raises(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await profile_service.add_experience(UserId(uuid4()), _experience())

    @pytest.mark.asyncio
    async def test_remove_experience(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        user_id = UserId(uuid4())
        await profile_service.upsert_profile(
            user_id, ProfileDetails(status="Developer", skills=["python"])
        )
        entry = _experience()
        await profile_service.add_experience(user_id, entry)

        # Act
        profile = await profile_service.remove_experience(user_id, entry.id)

        # Assert
        assert profile.experience == []

    @pytest.mark.asyncio
    async def test_remove_unknown_experience_raises_not_found(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        user_id = UserId(uuid4())
        await profile_service.upsert_profile(
            user_id, ProfileDetails(status="Developer", skills=["python"])
        )

        # Act & Assert
        with pytest.raises(NotFoundError):
            await profile_service.remove_experience(user_id, ExperienceId(uuid4()))


class TestEducation:
    """Tests for education entries."""

    @pytest.mark.asyncio
    async def test_add_and_remove_education(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        user_id = UserId(uuid4())
        await profile_service.upsert_profile(
            user_id, ProfileDetails(status="Student", skills=["math"])
        )
        entry = Education(
            id=EducationId(uuid4()),
            school="University of London",
            degree="BSc",
            field_of_study="Mathematics",
            from_date=date(2015, 9, 1),
            to_date=date(2018, 6, 30),
        )

        # Act
        added = await profile_service.add_education(user_id, entry)
        removed = await profile_service.remove_education(user_id, entry.id)

        # Assert
        assert [e.id for e in added.education] == [entry.id]
        assert removed.education == []


class TestDeleteProfile:
    """Tests for delete_profile method."""

    @pytest.mark.asyncio
    async def test_delete_reports_whether_profile_existed(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        user_id = UserId(uuid4())
        await profile_service.upsert_profile(
            user_id, ProfileDetails(status="Developer", skills=["python"])
        )

        # Act & Assert
        assert await profile_service.delete_profile(user_id) is True
        assert await profile_service.delete_profile(user_id) is False
        with pytest.raises(NotFoundError):
            await profile_service.get_profile(user_id)
