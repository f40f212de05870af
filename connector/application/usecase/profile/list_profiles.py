"""List profiles use case."""

import logfire
from pydantic import BaseModel

from connector.application.usecase.base import BaseUseCase
from connector.domain.service import ProfileService, UserService

from .views import ProfileView


class ListProfilesRequest(BaseModel):
    """List profiles request."""

    pass


class ListProfilesResponse(BaseModel):
    """List profiles response."""

    profiles: list[ProfileView]


class ListProfilesUseCase(BaseUseCase):
    """Use case for listing every profile with its owner."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        """Initialize list profiles use case.

        Args:
            profile_service: Profile domain service
            user_service: User domain service
        """
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: ListProfilesRequest) -> ListProfilesResponse:
        profiles = await self.profile_service.list_profiles()

        # Batch-load owners (avoid N+1)
        owners = await self.user_service.get_by_ids([p.user_id for p in profiles])

        views = []
        for profile in profiles:
            owner = owners.get(profile.user_id)
            if owner is None:
                logfire.warn(
                    "Profile without owner skipped", profile_id=str(profile.id)
                )
                continue
            views.append(ProfileView.from_domain(profile, owner))

        return ListProfilesResponse(profiles=views)
