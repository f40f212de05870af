"""Profile domain service."""

from typing import Any
from uuid import uuid4

import logfire

from connector.domain.error import NotFoundError
from connector.domain.model import Education, Experience, Profile, ProfileDetails
from connector.domain.model.common import utcnow
from connector.domain.repository import ProfileRepository
from connector.domain.value import EducationId, ExperienceId, ProfileId, UserId

from .base import Service
from .ownership import OwnershipPolicy


class ProfileService(Service):
    """Domain service for profiles and their experience/education entries.

    Every mutation targets the caller's own profile, looked up by owner.
    """

    def __init__(
        self,
        profile_repository: ProfileRepository,
        ownership_policy: OwnershipPolicy,
    ) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
            ownership_policy: Ownership rules for profiles and their entries
        """
        self.profile_repository = profile_repository
        self.ownership_policy = ownership_policy

    async def get_profile(self, user_id: UserId, for_update: bool = False) -> Profile:
        """Get the profile owned by ``user_id``.

        Raises:
            NotFoundError: If the user has no profile
        """
        profile = await self.profile_repository.find_by_user(
            user_id, for_update=for_update
        )
        if not profile:
            logfire.warn("Profile not found", user_id=str(user_id))
            raise NotFoundError("Profile", str(user_id))
        return profile

    async def list_profiles(self) -> list[Profile]:
        """List every profile."""
        return await self.profile_repository.find_all()

    async def upsert_profile(self, user_id: UserId, details: ProfileDetails) -> Profile:
        """Create the user's profile, or update it if one exists.

        On update, details left as None keep their current value.
        """
        with logfire.span("profile_service.upsert_profile", user_id=str(user_id)):
            existing = await self.profile_repository.find_by_user(
                user_id, for_update=True
            )

            if existing:
                self.ownership_policy.ensure_may_mutate(user_id, existing)
                changes: dict[str, Any] = {
                    name: getattr(details, name)
                    for name in type(details).model_fields
                    if getattr(details, name) is not None
                }
                changes["updated_at"] = utcnow()
                profile = existing.model_copy(update=changes)
                logfire.info("Updating profile", profile_id=str(profile.id))
            else:
                profile = Profile(
                    id=ProfileId(uuid4()),
                    user_id=user_id,
                    **{name: getattr(details, name) for name in type(details).model_fields},
                )
                logfire.info("Creating profile", profile_id=str(profile.id))

            return await self.profile_repository.save(profile)

    async def add_experience(self, user_id: UserId, experience: Experience) -> Profile:
        """Add an experience entry to the front of the user's profile.

        Raises:
            NotFoundError: If the user has no profile
        """
        with logfire.span("profile_service.add_experience", user_id=str(user_id)):
            profile = await self.get_profile(user_id, for_update=True)
            self.ownership_policy.ensure_may_mutate(user_id, profile)

            updated = profile.model_copy(
                update={
                    "experience": [experience, *profile.experience],
                    "updated_at": utcnow(),
                }
            )
            logfire.info("Experience added", experience_id=str(experience.id))
            return await self.profile_repository.save(updated)

    async def remove_experience(
        self, user_id: UserId, experience_id: ExperienceId
    ) -> Profile:
        """Remove an experience entry from the user's profile.

        Raises:
            NotFoundError: If the user has no profile or no such entry
        """
        with logfire.span(
            "profile_service.remove_experience",
            user_id=str(user_id),
            experience_id=str(experience_id),
        ):
            profile = await self.get_profile(user_id, for_update=True)
            entry = profile.find_experience(experience_id)
            if not entry:
                raise NotFoundError("Experience", str(experience_id))
            self.ownership_policy.ensure_may_mutate(user_id, entry, parent=profile)

            updated = profile.model_copy(
                update={
                    "experience": [e for e in profile.experience if e.id != entry.id],
                    "updated_at": utcnow(),
                }
            )
            logfire.info("Experience removed", experience_id=str(experience_id))
            return await self.profile_repository.save(updated)

    async def add_education(self, user_id: UserId, education: Education) -> Profile:
        """Add an education entry to the front of the user's profile.

        Raises:
            NotFoundError: If the user has no profile
        """
        with logfire.span("profile_service.add_education", user_id=str(user_id)):
            profile = await self.get_profile(user_id, for_update=True)
            self.ownership_policy.ensure_may_mutate(user_id, profile)

            updated = profile.model_copy(
                update={
                    "education": [education, *profile.education],
                    "updated_at": utcnow(),
                }
            )
            logfire.info("Education added", education_id=str(education.id))
            return await self.profile_repository.save(updated)

    async def remove_education(
        self, user_id: UserId, education_id: EducationId
    ) -> Profile:
        """Remove an education entry from the user's profile.

        Raises:
            NotFoundError: If the user has no profile or no such entry
        """
        with logfire.span(
            "profile_service.remove_education",
            user_id=str(user_id),
            education_id=str(education_id),
        ):
            profile = await self.get_profile(user_id, for_update=True)
            entry = profile.find_education(education_id)
            if not entry:
                raise NotFoundError("Education", str(education_id))
            self.ownership_policy.ensure_may_mutate(user_id, entry, parent=profile)

            updated = profile.model_copy(
                update={
                    "education": [e for e in profile.education if e.id != entry.id],
                    "updated_at": utcnow(),
                }
            )
            logfire.info("Education removed", education_id=str(education_id))
            return await self.profile_repository.save(updated)

    async def delete_profile(self, user_id: UserId) -> bool:
        """Delete the user's profile, if any.

        Returns:
            True if a profile was deleted
        """
        with logfire.span("profile_service.delete_profile", user_id=str(user_id)):
            deleted = await self.profile_repository.delete_by_user(user_id)
            logfire.info("Profile deleted", user_id=str(user_id), deleted=deleted)
            return deleted
