"""In-memory transaction manager for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from connector.domain.repository import TransactionManager

from .post import InMemoryPostRepository
from .profile import InMemoryProfileRepository
from .user import InMemoryUserRepository

InMemoryRepository = InMemoryPostRepository | InMemoryProfileRepository | InMemoryUserRepository


class InMemoryTransactionManager(TransactionManager):
    """Restores the repositories' contents when an atomic block fails."""

    def __init__(self, *repositories: InMemoryRepository) -> None:
        self._repositories = repositories

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        snapshots = [repo.snapshot() for repo in self._repositories]
        try:
            yield
        except Exception:
            for repo, snapshot in zip(self._repositories, snapshots):
                repo.restore(snapshot)
            raise
