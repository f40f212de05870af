"""In-memory user repository for testing."""

from typing import Optional

from connector.domain.model.user import User
from connector.domain.repository.user import UserRepository
from connector.domain.value import Email, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    def snapshot(self) -> dict[UserId, User]:
        return dict(self._users)

    def restore(self, snapshot: dict[UserId, User]) -> None:
        self._users = dict(snapshot)

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        return next((u for u in self._users.values() if u.email == email), None)

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        return [self._users[uid] for uid in user_ids if uid in self._users]

    async def save(self, user: User) -> User:
        self._users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> bool:
        return self._users.pop(user_id, None) is not None
