"""Add and remove experience use cases."""

from datetime import date
from uuid import UUID, uuid4

from pydantic import BaseModel

from connector.application.usecase.base import BaseUseCase
from connector.domain.model import Experience
from connector.domain.service import ProfileService, UserService
from connector.domain.value import ExperienceId, UserId

from .views import ProfileView


class AddExperienceRequest(BaseModel):
    """Add experience request."""

    user_id: str  # User ID from authenticated user
    title: str
    company: str
    from_date: date
    location: str | None = None
    to_date: date | None = None
    current: bool = False
    description: str | None = None


class RemoveExperienceRequest(BaseModel):
    """Remove experience request."""

    user_id: str  # User ID from authenticated user
    experience_id: str


class AddExperienceUseCase(BaseUseCase):
    """Use case for adding an experience entry to the caller's profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: AddExperienceRequest) -> ProfileView:
        """Add the entry at the front of the list.

        Raises:
            NotFoundError: If the caller has no profile
        """
        user_id = UserId(UUID(request.user_id))
        entry = Experience(
            id=ExperienceId(uuid4()),
            title=request.title,
            company=request.company,
            location=request.location,
            from_date=request.from_date,
            to_date=request.to_date,
            current=request.current,
            description=request.description,
        )
        profile = await self.profile_service.add_experience(user_id, entry)
        owner = await self.user_service.get_by_id(user_id)
        return ProfileView.from_domain(profile, owner)


class RemoveExperienceUseCase(BaseUseCase):
    """Use case for removing an experience entry from the caller's profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: RemoveExperienceRequest) -> ProfileView:
        """Remove the entry.

        Raises:
            NotFoundError: If the caller has no profile or no such entry
        """
        user_id = UserId(UUID(request.user_id))
        profile = await self.profile_service.remove_experience(
            user_id, ExperienceId(UUID(request.experience_id))
        )
        owner = await self.user_service.get_by_id(user_id)
        return ProfileView.from_domain(profile, owner)
