"""In-memory profile repository for testing."""

from typing import Optional

from connector.domain.model.profile import Profile
from connector.domain.repository.profile import ProfileRepository
from connector.domain.value import UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing.

    Keyed by owner, which keeps profiles one-per-user.
    """

    def __init__(self) -> None:
        self._profiles: dict[UserId, Profile] = {}

    def snapshot(self) -> dict[UserId, Profile]:
        return dict(self._profiles)

    def restore(self, snapshot: dict[UserId, Profile]) -> None:
        self._profiles = dict(snapshot)

    async def find_by_user(
        self, user_id: UserId, for_update: bool = False
    ) -> Optional[Profile]:
        return self._profiles.get(user_id)

    async def find_all(self) -> list[Profile]:
        return sorted(self._profiles.values(), key=lambda p: p.created_at)

    async def save(self, profile: Profile) -> Profile:
        self._profiles[profile.user_id] = profile
        return profile

    async def delete_by_user(self, user_id: UserId) -> bool:
        return self._profiles.pop(user_id, None) is not None
