"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from connector.application.usecase.base import BaseUseCase
from connector.domain.service import UserService
from connector.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str  # From the verified token


class GetCurrentUserResponse(BaseModel):
    """The authenticated user, without the password hash."""

    id: str
    name: str
    email: str
    avatar: str | None
    created_at: datetime


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for loading the authenticated user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Load the user named by the token.

        Raises:
            NotFoundError: If the account no longer exists
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        return GetCurrentUserResponse(
            id=str(user.id),
            name=user.name,
            email=user.email.root,
            avatar=user.avatar,
            created_at=user.created_at,
        )
