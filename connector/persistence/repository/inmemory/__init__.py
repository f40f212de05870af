"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository
from .profile import InMemoryProfileRepository
from .transaction import InMemoryTransactionManager
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryPostRepository",
    "InMemoryProfileRepository",
    "InMemoryTransactionManager",
    "InMemoryUserRepository",
]
