"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from connector.domain.model.profile import Profile
from connector.domain.value import UserId


class ProfileRepository(ABC):
    """Repository for Profile aggregate.

    A profile is keyed by its owner: there is at most one per user.
    """

    @abstractmethod
    async def find_by_user(
        self, user_id: UserId, for_update: bool = False
    ) -> Optional[Profile]:
        """Find the profile owned by ``user_id``.

        Args:
            user_id: Owner of the profile
            for_update: Lock the profile until the current transaction ends

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Profile]:
        """Find all profiles, oldest first."""
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or whole-document replace)."""
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UserId) -> bool:
        """Delete the profile owned by ``user_id``.

        Returns:
            True if a profile was deleted, False if none existed
        """
        pass
