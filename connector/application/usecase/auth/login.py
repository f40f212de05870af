"""Login use case."""

import logfire
from pydantic import BaseModel

from connector.application.usecase.base import BaseUseCase
from connector.domain.service import JWTService, UserService


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class TokenResponse(BaseModel):
    """Bearer token issued on login or registration."""

    token: str


class LoginUseCase(BaseUseCase):
    """Use case for exchanging email and password for a token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> TokenResponse:
        """Execute login flow.

        Raises:
            InvalidCredentialsError: If email or password do not match
        """
        with logfire.span("login.execute"):
            user = await self.user_service.authenticate(request.email, request.password)
            return TokenResponse(token=self.jwt_service.issue(user.id))
