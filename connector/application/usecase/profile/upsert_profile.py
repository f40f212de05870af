"""Create or update profile use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from connector.application.usecase.base import BaseUseCase
from connector.domain.error import ValidationError
from connector.domain.model import ProfileDetails, SocialLinks
from connector.domain.service import ProfileService, UserService
from connector.domain.value import UserId, split_skills

from .views import ProfileView


class UpsertProfileRequest(BaseModel):
    """Create or update profile request."""

    user_id: str  # User ID from authenticated user
    status: str
    skills: str | list[str]  # Comma separated string or list
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class UpsertProfileUseCase(BaseUseCase):
    """Use case for creating the caller's profile or updating it."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        """Initialize upsert profile use case.

        Args:
            profile_service: Profile domain service
            user_service: User domain service
        """
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: UpsertProfileRequest) -> ProfileView:
        """Execute create-or-update flow.

        Raises:
            NotFoundError: If the account no longer exists
            ValidationError: If status or skills end up empty
        """
        user_id = UserId(UUID(request.user_id))
        skills = split_skills(request.skills)
        if not request.status.strip():
            raise ValidationError("Status is required")
        if not skills:
            raise ValidationError("Skills is required")

        owner = await self.user_service.get_by_id(user_id)

        with logfire.span("upsert_profile.execute", user_id=request.user_id):
            details = ProfileDetails(
                status=request.status,
                skills=skills,
                company=request.company,
                website=request.website,
                location=request.location,
                bio=request.bio,
                github_username=request.github_username,
                social=SocialLinks(
                    youtube=request.youtube,
                    twitter=request.twitter,
                    facebook=request.facebook,
                    linkedin=request.linkedin,
                    instagram=request.instagram,
                ),
            )
            profile = await self.profile_service.upsert_profile(user_id, details)
            return ProfileView.from_domain(profile, owner)
