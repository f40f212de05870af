"""Get profile use case."""

from uuid import UUID

from pydantic import BaseModel

from connector.application.usecase.base import BaseUseCase
from connector.domain.service import ProfileService, UserService
from connector.domain.value import UserId

from .views import ProfileView


class GetProfileRequest(BaseModel):
    """Get profile request."""

    user_id: str  # Owner of the profile


class GetProfileUseCase(BaseUseCase):
    """Use case for fetching the profile owned by a user.

    Serves both the caller's own profile and the public lookup by user.
    """

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        """Initialize get profile use case.

        Args:
            profile_service: Profile domain service
            user_service: User domain service
        """
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: GetProfileRequest) -> ProfileView:
        """Fetch the profile.

        Raises:
            NotFoundError: If the user has no profile
        """
        user_id = UserId(UUID(request.user_id))
        profile = await self.profile_service.get_profile(user_id)
        owner = await self.user_service.get_by_id(user_id)
        return ProfileView.from_domain(profile, owner)
