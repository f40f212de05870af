"""JWT token domain service."""

from uuid import UUID

import logfire

from connector.config import AuthSettings
from connector.domain.value import UserId
from connector.util.jwt import InvalidTokenError, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Issues and verifies stateless bearer tokens.

    Verification never touches storage: the signature and the embedded
    expiry are the whole of a token's validity.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def issue(self, user_id: UserId) -> str:
        """Issue a token bound to ``user_id``.

        Args:
            user_id: User ID

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.issue", user_id=str(user_id)):
            token = create_token(str(user_id), self.auth_settings)
            logfire.info(
                "JWT token issued",
                user_id=str(user_id),
                expiry_hours=self.auth_settings.jwt_expiry_hours,
            )
            return token

    def verify(self, token: str) -> UserId:
        """Verify a token and return the user it is bound to.

        Args:
            token: JWT token string

        Returns:
            User ID embedded in the token

        Raises:
            ExpiredTokenError: If the token is past its expiry
            InvalidTokenError: If the token is forged or malformed
        """
        payload = verify_token(token, self.auth_settings)
        try:
            return UserId(UUID(payload.user_id))
        except ValueError:
            raise InvalidTokenError("Invalid token subject")
