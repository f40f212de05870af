"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from connector.domain.model.user import User
from connector.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for User aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by normalized email."""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find all users whose IDs are in ``user_ids``; unknown IDs are skipped."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a user.

        Returns:
            True if a user was deleted, False if none existed
        """
        pass
