"""Register use case."""

import logfire
from pydantic import BaseModel

from connector.application.usecase.base import BaseUseCase
from connector.domain.service import JWTService, UserService

from .login import TokenResponse


class RegisterRequest(BaseModel):
    """Register request."""

    name: str
    email: str
    password: str


class RegisterUseCase(BaseUseCase):
    """Use case for creating an account and logging it in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> TokenResponse:
        """Execute registration flow.

        Steps:
        1. Create the identity (email must be unused)
        2. Issue a token for it

        Raises:
            EmailAlreadyRegisteredError: If the email is already taken
        """
        with logfire.span("register.execute"):
            user = await self.user_service.register(
                name=request.name, email=request.email, password=request.password
            )
            return TokenResponse(token=self.jwt_service.issue(user.id))
