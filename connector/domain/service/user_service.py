"""User domain service."""

from uuid import uuid4

import logfire

from connector.config import AuthSettings
from connector.domain.error import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    NotFoundError,
)
from connector.domain.model.user import User
from connector.domain.repository import UserRepository
from connector.domain.value import Email, UserId
from connector.util.password import hash_password, verify_password

from .base import Service


class UserService(Service):
    """Domain service for the credential store."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (bcrypt work factor)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def register(self, name: str, email: str, password: str) -> User:
        """Create a new identity.

        Args:
            name: Display name
            email: Email address (normalized before the uniqueness check)
            password: Plain-text password, stored only as a bcrypt hash

        Returns:
            Created user

        Raises:
            EmailAlreadyRegisteredError: If the email is already taken
        """
        normalized = Email(email)
        with logfire.span("user_service.register", email=normalized.root):
            if await self.user_repository.find_by_email(normalized):
                logfire.warn("Registration with taken email", email=normalized.root)
                raise EmailAlreadyRegisteredError(normalized.root)

            user = User(
                id=UserId(uuid4()),
                name=name,
                email=normalized,
                avatar=normalized.gravatar_url(),
                password_hash=hash_password(
                    password, rounds=self.auth_settings.bcrypt_rounds
                ),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check an email/password pair.

        Unknown email and wrong password fail the same way.

        Raises:
            InvalidCredentialsError: If the credentials do not match
        """
        normalized = Email(email)
        with logfire.span("user_service.authenticate", email=normalized.root):
            user = await self.user_repository.find_by_email(normalized)
            if not user:
                logfire.warn("Login for unknown email", email=normalized.root)
                raise InvalidCredentialsError()

            if not verify_password(password, user.password_hash):
                logfire.warn("Login with wrong password", user_id=str(user.id))
                raise InvalidCredentialsError()

            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get a user by ID.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_repository.find_by_id(user_id)
        if not user:
            raise NotFoundError("User", str(user_id))
        return user

    async def get_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Batch-load users, keyed by ID. Unknown IDs are absent from the result."""
        if not user_ids:
            return {}
        users = await self.user_repository.find_by_ids(list(set(user_ids)))
        return {user.id: user for user in users}

    async def delete_user(self, user_id: UserId) -> None:
        """Delete an identity.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.delete_user", user_id=str(user_id)):
            deleted = await self.user_repository.delete(user_id)
            if not deleted:
                raise NotFoundError("User", str(user_id))
            logfire.info("User deleted", user_id=str(user_id))
