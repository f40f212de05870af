"""Add and remove education use cases."""

from datetime import date
from uuid import UUID, uuid4

from pydantic import BaseModel

from connector.application.usecase.base import BaseUseCase
from connector.domain.model import Education
from connector.domain.service import ProfileService, UserService
from connector.domain.value import EducationId, UserId

from .views import ProfileView


class AddEducationRequest(BaseModel):
    """Add education request."""

    user_id: str  # User ID from authenticated user
    school: str
    degree: str
    field_of_study: str
    from_date: date
    to_date: date | None = None
    current: bool = False
    description: str | None = None


class RemoveEducationRequest(BaseModel):
    """Remove education request."""

    user_id: str  # User ID from authenticated user
    education_id: str


class AddEducationUseCase(BaseUseCase):
    """Use case for adding an education entry to the caller's profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: AddEducationRequest) -> ProfileView:
        """Add the entry at the front of the list.

        Raises:
            NotFoundError: If the caller has no profile
        """
        user_id = UserId(UUID(request.user_id))
        entry = Education(
            id=EducationId(uuid4()),
            school=request.school,
            degree=request.degree,
            field_of_study=request.field_of_study,
            from_date=request.from_date,
            to_date=request.to_date,
            current=request.current,
            description=request.description,
        )
        profile = await self.profile_service.add_education(user_id, entry)
        owner = await self.user_service.get_by_id(user_id)
        return ProfileView.from_domain(profile, owner)


class RemoveEducationUseCase(BaseUseCase):
    """Use case for removing an education entry from the caller's profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: RemoveEducationRequest) -> ProfileView:
        """Remove the entry.

        Raises:
            NotFoundError: If the caller has no profile or no such entry
        """
        user_id = UserId(UUID(request.user_id))
        profile = await self.profile_service.remove_education(
            user_id, EducationId(UUID(request.education_id))
        )
        owner = await self.user_service.get_by_id(user_id)
        return ProfileView.from_domain(profile, owner)
